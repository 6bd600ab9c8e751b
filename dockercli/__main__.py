"""Entry point for ``python -m dockercli``."""

from dockercli.main import main

if __name__ == '__main__':
    main()
