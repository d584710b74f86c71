"""Constants for email builder routes."""

NO_FILE_DETAIL = "No file"
UPLOAD_CHUNK_BYTES = 64 * 1024
