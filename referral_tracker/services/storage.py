import os
import secrets
import time
from contextlib import contextmanager

from flask import current_app
import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError

from ..errors import StorageError, ValidationError

RESUME_MIMETYPE = "application/pdf"
RESUME_PREFIX = "resumes"
LOCAL_URL_PREFIX = "/uploads/"


def _ensure_local_dir(subdir=""):
    d = os.path.join(current_app.config['LOCAL_STORAGE_DIR'], subdir)
    os.makedirs(d, exist_ok=True)
    return d


def _s3_client():
    # endpoint_url may be empty in AWS-managed S3
    s3_kwargs = {}
    endpoint = current_app.config.get('S3_ENDPOINT')
    if endpoint:
        s3_kwargs['endpoint_url'] = endpoint
    region = current_app.config.get('S3_REGION')
    if region:
        s3_kwargs['region_name'] = region

    s3_config = Config(signature_version='s3v4', s3={'addressing_style': 'virtual'})
    return boto3.client(
        's3',
        aws_access_key_id=current_app.config.get('S3_ACCESS_KEY'),
        aws_secret_access_key=current_app.config.get('S3_SECRET_KEY'),
        config=s3_config,
        **s3_kwargs,
    )


def _stream_size(file_storage):
    stream = getattr(file_storage, 'stream', file_storage)
    pos = stream.tell()
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(pos)
    return size


def check_resume(file_storage):
    """Reject anything that is not a PDF within the configured size limit."""
    if getattr(file_storage, 'mimetype', None) != RESUME_MIMETYPE:
        raise ValidationError("Only PDF files are allowed", errors={"resume": "Only PDF files are allowed"})
    limit = current_app.config.get('MAX_RESUME_BYTES', 5 * 1024 * 1024)
    if _stream_size(file_storage) > limit:
        msg = f"Resume file must not exceed {limit // (1024 * 1024)} MB"
        raise ValidationError(msg, errors={"resume": msg})


def _resume_key():
    # always .pdf; the client-supplied name is never trusted
    return f"resume-{int(time.time() * 1000)}-{secrets.randbelow(10**9)}.pdf"


def save_file(file_storage, prefix=""):
    backend = current_app.config.get('STORAGE_BACKEND', 'local')
    filename = _resume_key()
    key = f"{prefix}/{filename}" if prefix else filename
    stream = getattr(file_storage, 'stream', file_storage)
    try:
        stream.seek(0)
    except Exception:
        pass

    if backend == 's3':
        bucket = current_app.config.get('S3_BUCKET')
        try:
            _s3_client().upload_fileobj(stream, bucket, key, ExtraArgs={'ContentType': RESUME_MIMETYPE})
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"Could not store uploaded file: {e}") from e
        return f"s3://{bucket}/{key}"

    path = os.path.join(_ensure_local_dir(), key)
    os.makedirs(os.path.dirname(path), exist_ok=True)
    try:
        file_storage.save(path)
    except OSError as e:
        raise StorageError(f"Could not store uploaded file: {e}") from e
    return LOCAL_URL_PREFIX + key


def local_path(url: str) -> str:
    """Map a ``/uploads/...`` reference back to its path on disk."""
    rel = url[len(LOCAL_URL_PREFIX):]
    root = os.path.abspath(current_app.config['LOCAL_STORAGE_DIR'])
    path = os.path.abspath(os.path.join(root, rel))
    if os.path.commonpath([root, path]) != root:
        raise StorageError(f"Refusing to touch path outside storage dir: {url}")
    return path


def _split_s3(url: str):
    bucket_key = url.replace('s3://', '', 1).split('/', 1)
    return bucket_key[0], bucket_key[1]


def delete_file(url: str) -> None:
    if url.startswith('s3://'):
        bucket, key = _split_s3(url)
        try:
            _s3_client().delete_object(Bucket=bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"Could not delete {url}: {e}") from e
    elif url.startswith(LOCAL_URL_PREFIX):
        try:
            os.remove(local_path(url))
        except OSError as e:
            raise StorageError(f"Could not delete {url}: {e}") from e
    else:
        raise StorageError(f"Unsupported file reference: {url}")


def download_bytes(url: str) -> bytes:
    if url.startswith('s3://'):
        bucket, key = _split_s3(url)
        try:
            obj = _s3_client().get_object(Bucket=bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"Could not read {url}: {e}") from e
        return obj['Body'].read()
    elif url.startswith(LOCAL_URL_PREFIX):
        try:
            with open(local_path(url), 'rb') as f:
                return f.read()
        except OSError as e:
            raise StorageError(f"Could not read {url}: {e}") from e
    else:
        raise StorageError(f"Unsupported file reference: {url}")


@contextmanager
def stored_resume(file_storage):
    """Validate and store an uploaded resume for the duration of a block.

    Yields the stored reference, or None when no file was uploaded. If the
    block raises, the stored file is removed before the error propagates.
    """
    if not file_storage or not getattr(file_storage, 'filename', ''):
        yield None
        return

    check_resume(file_storage)
    url = save_file(file_storage, prefix=RESUME_PREFIX)
    try:
        yield url
    except Exception:
        try:
            delete_file(url)
        except StorageError:
            current_app.logger.warning('Could not remove orphaned upload %s', url, exc_info=True)
        raise
