"""
Test utilities package for trlang tests.

### test_helpers.py
- `create_source_file()`: Write a source file made of comment lines
- `create_temp_config_file()`: Context manager for temporary YAML config files
- `entry_lines()`: The ``key=value`` lines of a rendered language file
- `FIXED_NOW`: Deterministic timestamp for rendering
"""
