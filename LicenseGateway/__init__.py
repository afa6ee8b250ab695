"""
License Gateway Django project.

Hosts the licensing plugin and the plugin registry that mounts
plugin routes conditionally.
"""
