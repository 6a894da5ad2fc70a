"""
Changelogs test suite.

Tests are organized by layer:
    tests/unit/         Unit tests (tmp_path files, scripted terminal input)
    tests/integration/  The changelogs command through click's CliRunner

Run all tests:
    pytest

Run unit tests only:
    pytest tests/unit/
"""
