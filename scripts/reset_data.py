#!/usr/bin/env python3
"""Reset saved templates and the theme preference for clean testing"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.storage import get_database


def main():
    print('=== Resetting all data ===')

    db = get_database()
    keys = db.keys()
    db.clear()
    for key in keys:
        print(f'Cleared {key}')

    print('=== Data reset complete ===')
    print(f'Database: {db.db_path}')


if __name__ == "__main__":
    main()
