"""
Test utilities package for WristWatch tests.

## Available Modules

### test_helpers.py
- `create_temp_config_file()`: Context manager for temporary YAML config files
- `make_instant()`: Build an Instant from UTC calendar fields
"""
