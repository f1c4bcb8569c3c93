"""Service layer — file-facing operations that return ServiceResult."""
