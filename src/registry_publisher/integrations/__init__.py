"""External collaborators: one sub-package per interface, each with abc/real/fake."""
