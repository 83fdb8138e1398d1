"""Exception hierarchy for the dialog engine.

Usage errors signal a call site that violates a precondition and should be
fixed rather than retried. UnknownDialogError raised while resuming a
persisted frame means the stored stack no longer matches the catalog.
"""


class DialogError(Exception):
    """Base exception for all dialog engine errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DialogUsageError(DialogError):
    """Raised when a caller violates an operation's precondition."""


class MissingArgumentError(DialogUsageError):
    """Raised when a required argument is None or blank."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Missing required argument: {argument}")
        self.argument = argument


class DuplicateIdError(DialogUsageError):
    """Raised when a dialog id is registered twice in one catalog."""

    def __init__(self, dialog_id: str) -> None:
        super().__init__(f"A dialog with an id of '{dialog_id}' already added.")
        self.dialog_id = dialog_id


class EmptyStackError(DialogUsageError):
    """Raised when continuing a conversation whose stack is empty."""

    def __init__(self) -> None:
        super().__init__("The dialog stack is empty; begin a dialog instead of continuing.")


class DialogStackError(DialogUsageError):
    """Raised when a dialog drives the stack in an unsupported way."""


class InvalidTurnResultError(DialogUsageError):
    """Raised when a dialog returns something other than WAITING or COMPLETE."""

    def __init__(self, dialog_id: str, returned: object) -> None:
        super().__init__(
            f"Dialog '{dialog_id}' must return a waiting or complete DialogTurnResult, "
            f"got {returned!r}."
        )
        self.dialog_id = dialog_id


class UnknownDialogError(DialogError):
    """Raised when a dialog id cannot be found in the catalog."""

    def __init__(self, dialog_id: str, *, persisted: bool = False) -> None:
        if persisted:
            message = (
                f"The active dialog '{dialog_id}' is not registered. The persisted "
                "dialog stack does not match the current catalog."
            )
        else:
            message = f"A dialog with an id of '{dialog_id}' wasn't found."
        super().__init__(message)
        self.dialog_id = dialog_id
        self.persisted = persisted
