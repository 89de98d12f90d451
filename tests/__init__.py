"""
goskeleton test suite
=====================

Test Modules
------------
- test_models.py: Name validation and configuration models
- test_tree.py: Template tree providers and traversal
- test_generator.py: Project materialization
- test_cli.py: Command-line interface

Running Tests
-------------
    pytest
    pytest tests/test_generator.py::TestMaterialize
"""
