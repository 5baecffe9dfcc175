"""Domain layer — document parsing, frontmatter schemas, field mapping.

This layer depends only on stdlib, pydantic and ruamel.yaml.
It must never import from infrastructure, config, or the converter.
"""
