"""
changelogs.core: storage and session primitives.

Modules:
    constants   filenames, limits, exit codes
    exceptions  ChangelogsError hierarchy
    config      pydantic configuration model, TOML load/save
    logging     stdlib logging setup
    models      Version / Changelog and the line-oriented wire format
    store       ProjectStore: registry and per-project version files
    session     State, Message, Session (menu state machine)
"""
