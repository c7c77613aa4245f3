from __future__ import annotations

import logging
import os
from ftplib import FTP, all_errors, error_reply

from event_pipeline.models.error_record import (
    LOCAL_FILE_ERROR,
    REMOTE_DIR_ERROR,
    TRANSFER_ERROR,
)

"""Thin FTP client wrapper around ftplib.

connect_to_ftp  dial (5 s timeout) + login; fatal on failure
upload_file     open local file, CWD, STOR under the base name
close_connection QUIT, falling back to closing the socket

The dial timeout applies to connection establishment only. Once logged in
the socket is switched back to blocking mode, so a stalled transfer waits
indefinitely.
"""

DEFAULT_PORT = 21
DIAL_TIMEOUT_SECONDS = 5.0

logger = logging.getLogger(__name__)


class FtpConnectError(Exception):
    """Dial or login failed. No upload is attempted after this."""


class UploadError(Exception):
    """A single file could not be uploaded; the run continues."""

    def __init__(self, message: str, error_type: str) -> None:
        super().__init__(message)
        self.error_type = error_type


def split_host_port(address: str) -> tuple[str, int]:
    """Split ``host[:port]``; IPv6 literals must be bracketed (``[::1]:21``)."""
    address = address.strip()
    if address.startswith("["):
        host, _, rest = address[1:].partition("]")
        port = rest[1:] if rest.startswith(":") else ""
    elif address.count(":") == 1:
        host, _, port = address.partition(":")
    else:
        host, port = address, ""
    if not port:
        return host, DEFAULT_PORT
    try:
        return host, int(port)
    except ValueError as e:
        raise FtpConnectError(f"invalid port in FTP address '{address}'") from e


def connect_to_ftp(
    address: str, user: str, password: str, timeout: float = DIAL_TIMEOUT_SECONDS
) -> FTP:
    """Open the control connection and authenticate.

    Raises:
        FtpConnectError: dial or login failure (the socket is closed)
    """
    host, port = split_host_port(address)
    conn = FTP()
    try:
        conn.connect(host, port, timeout=timeout)
    except all_errors as e:
        raise FtpConnectError(f"error connecting to FTP server '{address}': {e}") from e

    # dial timeout only; transfers block without limit
    conn.timeout = None
    if conn.sock is not None:
        conn.sock.settimeout(None)

    # USER/PASS sent verbatim; FTP.login would turn an empty user into "anonymous"
    try:
        resp = conn.sendcmd(f"USER {user}")
        if resp.startswith("3"):
            resp = conn.sendcmd(f"PASS {password}")
        if not resp.startswith("2"):
            raise error_reply(resp)
    except all_errors as e:
        conn.close()
        raise FtpConnectError(f"error logging in to FTP server '{address}' as '{user}': {e}") from e

    logger.info("Connected to FTP server.")
    return conn


def upload_file(conn: FTP, remote_dir: str, local_file: str) -> int:
    """Upload one local file into ``remote_dir`` under its base name.

    Returns:
        Size of the uploaded file in bytes

    Raises:
        UploadError: with error_type LOCAL_FILE_ERROR, REMOTE_DIR_ERROR or
            TRANSFER_ERROR
    """
    remote_name = os.path.basename(local_file)
    try:
        fh = open(local_file, "rb")
    except OSError as e:
        raise UploadError(f"cannot open local file '{local_file}': {e}", LOCAL_FILE_ERROR) from e

    with fh:
        size = os.fstat(fh.fileno()).st_size
        try:
            conn.voidcmd(f"CWD {remote_dir}")
        except all_errors as e:
            raise UploadError(
                f"cannot change to remote directory '{remote_dir}': {e}", REMOTE_DIR_ERROR
            ) from e

        try:
            conn.storbinary(f"STOR {remote_name}", fh)
        except all_errors as e:
            raise UploadError(f"transfer of '{local_file}' failed: {e}", TRANSFER_ERROR) from e

    logger.info(f"File '{local_file}' uploaded to server.")
    return size


def close_connection(conn: FTP) -> None:
    """Sign off with QUIT; close the socket if the server does not answer."""
    try:
        conn.quit()
    except all_errors as e:
        logger.debug(f"QUIT failed, closing connection: {e}")
        conn.close()
