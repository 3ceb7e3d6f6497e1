"""Allow ``python -m videoresolver``."""

from videoresolver.cli.commands import main

if __name__ == "__main__":
    main()
