""" Exceptions raised by the site builder

The command layer turns every RpmsiteError into a single ERROR line
and exit code 1.
"""


class RpmsiteError(Exception):
    pass


class InputValidationError(RpmsiteError):
    pass


class SourceNotFound(InputValidationError):
    def __init__(self, path):
        super().__init__(f"COPR download directory not found: {path}")
        self.path = path


class EmptyInput(InputValidationError):
    def __init__(self, path):
        super().__init__(f"No RPM files found in {path}")
        self.path = path


class ExternalToolFailure(RpmsiteError):
    def __init__(self, cmd, returncode, output=None):
        super().__init__(f"Failed to run {cmd[0]} (exit status {returncode})")
        self.cmd = cmd
        self.returncode = returncode
        self.output = output


class TemplateError(RpmsiteError):
    pass


class TemplateNotFound(TemplateError):
    def __init__(self, path):
        super().__init__(f"Template not found: {path}")
        self.path = path


class UnresolvedPlaceholder(TemplateError):
    def __init__(self, template, keys):
        keys = sorted(set(keys))
        super().__init__(f"Unresolved placeholders in {template}: {', '.join(keys)}")
        self.template = template
        self.keys = keys
