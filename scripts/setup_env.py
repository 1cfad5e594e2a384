#!/usr/bin/env python3
"""Create .env.local from .env.example if it does not exist yet."""

import shutil
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]


def setup_env(root: Path = ROOT_DIR) -> bool:
    """Copy .env.example to .env.local. Returns True when a file was created."""
    target = root / ".env.local"
    if target.exists():
        print(".env.local already exists")
        return False

    example = root / ".env.example"
    if not example.exists():
        raise FileNotFoundError(f"{example} not found")

    shutil.copyfile(example, target)
    print("Created .env.local. Remember to set CLIENT_ID.")
    return True


def main() -> int:
    try:
        setup_env()
    except OSError as exc:
        print(f"Failed to create .env.local: {exc}", file=sys.stderr)
        return 1

    print("\nNext steps:")
    print("1. Add your Civic Auth CLIENT_ID to .env.local")
    print("2. Run: python -m src.server.run")
    print("3. Visit: http://localhost:3000/health")
    return 0


if __name__ == "__main__":
    sys.exit(main())
