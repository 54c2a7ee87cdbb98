"""Domain error taxonomy shared by the HTTP and chat-bot transports"""


class DocFormsError(Exception):
    """Base class for domain errors"""


class FieldValidationError(DocFormsError):
    """User input rejected for a form field; recovered by re-prompting"""

    def __init__(self, field_name: str, reason: str):
        super().__init__(reason)
        self.field_name = field_name
        self.reason = reason


class NotFoundError(DocFormsError):
    """Template, document or form session does not exist"""


class StateConflictError(DocFormsError):
    """Operation conflicts with the current record state (e.g. finalizing twice)"""


class TransientExternalError(DocFormsError):
    """An external collaborator failed after its retry budget"""


class NotificationError(TransientExternalError):
    """E-mail or SMS delivery failed"""


class RenderingFailedError(TransientExternalError):
    """HTML to PDF conversion failed"""


class TelegramAPIError(TransientExternalError):
    """Telegram Bot API call failed or returned ok=false"""
