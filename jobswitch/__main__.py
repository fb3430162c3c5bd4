"""Entry point for ``python -m jobswitch <command>``.

Commands:
    doctor   – check Python, dependencies, catalog files and settings
    catalog  – list the entries of a catalog
    commands – show the chat commands the current settings register
    resolve  – resolve a class/job token or Phantom Job query (no side effects)
    run      – dispatch a chat command against a simulated host session
    config   – show, change or migrate the settings file
"""
from jobswitch.cli import main

if __name__ == "__main__":
    main()
