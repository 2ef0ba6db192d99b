"""
Shared Config Module
====================

Holds the YAML settings files read by ``postboard.shared.core.configuration``:

- settings/defaults.yaml: shipped system defaults
- settings/user.yaml, settings/project.yaml: optional local overrides
"""
