"""Constants for idea, chat and code routes."""

NO_CODE_DETAIL = "No response from AI"
FEEDBACK_OK_STATUS = "ok"
