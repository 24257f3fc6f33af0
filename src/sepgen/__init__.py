"""
sepgen - Cisco SIP phone provisioning file generator

Collects phone settings through an interactive terminal form and writes the
SEP<MAC>.cnf.xml document the phone downloads at boot.

Package Structure:
- core/form/: field registry, visibility rules, lookups and the editing session
- core/serializer.py: XML rendering and file output
- core/utils/: logging and configuration
- cli/: Typer commands and the questionary-based form editor
"""

__version__ = "0.1.0"
