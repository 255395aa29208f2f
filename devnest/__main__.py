"""Allow ``python -m devnest``."""

from devnest.app import main

if __name__ == "__main__":
    main()
