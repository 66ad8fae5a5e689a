"""Core wiki components: pages, routes, validation, storage and rendering."""
