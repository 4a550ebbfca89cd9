# tests\__init__.py
"""
Test Suite for random_word.

Organization:
- `test_index`, `test_schema`: pure logic, no filesystem.
- `test_loader`, `test_cache`: shard loading and caching against temporary word lists.
- `test_query`: the public query functions against the bundled word lists.
- `test_config`, `test_logging_config`: settings and logging setup.
"""
