"""
Core layer of the configuration store.

Holds the collaborator interfaces, the error taxonomy and the pure
versioning logic. Nothing in this layer touches the filesystem.
"""
