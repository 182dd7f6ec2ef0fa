"""Shared helpers for show tests."""

import contextlib
import io
import subprocess
from unittest import mock

import requests

PLATFORM_SYSTEM = "showcli.utils.platform_utils.platform.system"
REQUESTS_GET = "showcli.utils.http_utils.requests.get"
SUBPROCESS_RUN = "showcli.utils.run_utils.subprocess.run"

SYSTEM_NAMES = {
    "linux": "Linux",
    "macos": "Darwin",
    "windows": "Windows",
}


def on_system(name):
    """Patch the detected operating system ('linux', 'macos' or 'windows')."""
    return mock.patch(PLATFORM_SYSTEM, return_value=SYSTEM_NAMES[name])


def fake_response(text, status_code=200):
    """Build a stand-in for a requests.Response."""
    response = mock.Mock()
    response.text = text
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    else:
        response.raise_for_status.return_value = None
    return response


def completed(args, returncode=0):
    return subprocess.CompletedProcess(args, returncode)


@contextlib.contextmanager
def captured_stdout():
    with mock.patch("sys.stdout", new_callable=io.StringIO) as stdout:
        yield stdout
