from flask import current_app
from ..errors import StorageError
from ..services.storage import delete_file


def remove_resume(url: str) -> bool:
    """Best-effort removal of a resume whose candidate is gone.

    Returns False (and logs) when the file could not be deleted.
    """
    try:
        delete_file(url)
    except StorageError as e:
        current_app.logger.warning('Error deleting resume file %s: %s', url, e.message)
        return False
    current_app.logger.info('Deleted resume file %s', url)
    return True
