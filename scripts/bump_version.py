#!/usr/bin/env python3

import argparse
import re
import sys
from pathlib import Path

REPO_DIR = Path(__file__).resolve().parent.parent


INIT = REPO_DIR / 'jabberkit' / '__init__.py'
SETUP = REPO_DIR / 'setup.py'

VERSION_RX = r'\d+\.\d+\.\d+'


def get_current_version() -> str:
    content = INIT.read_text(encoding='utf8')
    match = re.search(VERSION_RX, content)
    if match is None:
        sys.exit('Unable to find current version')
    return match[0]


def bump_version(path: Path, current_version: str, new_version: str) -> None:
    content = path.read_text(encoding='utf8')
    if current_version not in content:
        sys.exit(f'Version {current_version} not found in {path.name}')
    content = content.replace(current_version, new_version, 1)
    path.write_text(content, encoding='utf8')


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Bump Version')
    parser.add_argument('version', help='The new version, e.g. 1.5.0')
    args = parser.parse_args()

    if re.fullmatch(VERSION_RX, args.version) is None:
        sys.exit(f'Invalid version: {args.version}')

    current_version = get_current_version()

    for path in (INIT, SETUP):
        bump_version(path, current_version, args.version)
