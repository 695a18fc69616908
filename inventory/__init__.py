"""
In-memory inventory tracker.

Packages:
    catalog   - Product model and the indexed in-memory catalog
    config    - Settings loaded from the environment
    core      - Application exceptions
    schemas   - Input schemas for creating and editing products
    services  - Service layer used by the shell
    shell     - Interactive text menu
    utils     - Input validators and report formatting
"""

__version__ = "1.0.0"
