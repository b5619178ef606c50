"""Exceptions raised while selecting or running a template generator."""


class TemplateNotFoundError(LookupError):
    """Raised when a requested generator has no entry in the registry.

    Covers unknown names, generators that vanished between listing and
    validation, and answers given against an empty registry.
    """

    def __init__(self, identifier: str, template_name: str | None = None):
        self.identifier = identifier
        self.template_name = template_name or identifier
        super().__init__(f"Template {self.template_name} not found")
