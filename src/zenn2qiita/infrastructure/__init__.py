"""Infrastructure layer — filesystem access.

The only I/O in zenn2qiita lives here: reading a previously generated
output document to recover its Qiita identifiers.
"""
