"""polymer-init: choose and run a project template generator."""

__version__ = "0.1.0"
