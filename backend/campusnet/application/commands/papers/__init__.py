"""Paper commands."""

from .upload_paper import UploadPaperCommand, UploadPaperHandler
from .delete_paper import DeletePaperCommand, DeletePaperHandler

__all__ = [
    "UploadPaperCommand",
    "UploadPaperHandler",
    "DeletePaperCommand",
    "DeletePaperHandler",
]
