"""Entry-Point für PyInstaller – startet den Disk-Usage-CLI."""

from disk_usage.scan import main

if __name__ == "__main__":
    main()
