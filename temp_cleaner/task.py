"""
Scheduled task installation.

Registers a Windows scheduled task that runs temp_cleaner at startup with the
options of the current invocation. The registration script is fed to
PowerShell on stdin; its stdout and stderr are drained on separate threads.
"""

from __future__ import annotations

import logging
import os
import subprocess
import sys
import threading
from pathlib import Path
from typing import IO, Callable, Optional, Sequence

from .config import Config
from .durations import format_duration
from .errors import TempCleanerError
from .output import open_log_file

LOGGER = logging.getLogger(__name__)

TASK_NAME = "temp-cleaner"
POWERSHELL_COMMAND = ("powershell.exe", "-NoProfile", "-WindowStyle", "Hidden", "-Command", "-")

SCRIPT_TEMPLATE = """\
$ErrorActionPreference = "Stop"
$currentExe = "{executable}"
$action = New-ScheduledTaskAction -Execute "$currentExe" -Argument "{arguments}"
$trigger = New-ScheduledTaskTrigger -AtStartup
$settings = New-ScheduledTaskSettingsSet
$task = New-ScheduledTask -Action $action -Trigger $trigger -Settings $settings
Register-ScheduledTask -Force -TaskPath "{task_path}" -TaskName "{task_name}" -InputObject $task -User SYSTEM
"""

ScriptRunner = Callable[[str], None]


class TaskInstallError(TempCleanerError):
    """Raised when the scheduled task cannot be registered."""


def _quote(value: str) -> str:
    # Backtick-escaped quotes survive inside the PowerShell -Argument string
    return f'`"{value}`"'


def check_log_path(log_path: Path) -> None:
    """Make sure the scheduled run will be able to append to its log file.

    A file created only for this check is removed again.
    """
    existed = log_path.exists()
    with open_log_file(log_path):
        pass
    if not existed:
        log_path.unlink()


def build_task_args(config: Config) -> list[str]:
    """Translate the config into the arguments the scheduled run receives."""
    args = ["-m", "temp_cleaner"]

    if config.dry_run:
        args.append("--dry-run")
    if config.quiet:
        args.append("--quiet")
    if config.verbose:
        args.append("--verbose")
    if config.since is not None:
        args.extend(["--created-before", _quote(format_duration(config.since))])
    if config.log_path is not None:
        check_log_path(config.log_path)
        args.extend(["--log", _quote(str(config.log_path))])
    for root in config.roots:
        args.extend(["--root", _quote(str(root))])

    return args


def render_script(
    clean_args: Sequence[str],
    *,
    task_path: str = TASK_NAME,
    task_name: str = TASK_NAME,
    executable: Optional[str] = None,
) -> str:
    """Render the PowerShell registration script."""
    return SCRIPT_TEMPLATE.format(
        executable=executable or sys.executable,
        arguments=" ".join(clean_args),
        task_path=task_path,
        task_name=task_name,
    )


def _drain(stream: IO[str], sink: list[str], level: int, logger: logging.Logger) -> None:
    for line in stream:
        line = line.rstrip()
        if line:
            sink.append(line)
            logger.log(level, "powershell: %s", line)


def run_script(
    script: str,
    *,
    command: Sequence[str] = POWERSHELL_COMMAND,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Run ``script`` through the given shell command, feeding it on stdin.

    Raises:
        TaskInstallError: If the command cannot be started or exits non-zero.
    """
    logger = logger or LOGGER
    try:
        # pylint: disable=consider-using-with
        process = subprocess.Popen(
            list(command),
            stdin=subprocess.PIPE,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
        )
    except OSError as exc:
        raise TaskInstallError(f"failed to start {command[0]}") from exc

    stdout_lines: list[str] = []
    stderr_lines: list[str] = []
    readers = [
        threading.Thread(
            target=_drain, args=(process.stdout, stdout_lines, logging.DEBUG, logger), daemon=True
        ),
        threading.Thread(
            target=_drain, args=(process.stderr, stderr_lines, logging.ERROR, logger), daemon=True
        ),
    ]
    for reader in readers:
        reader.start()

    try:
        process.stdin.write(script)
        process.stdin.close()
    except OSError as exc:
        process.kill()
        raise TaskInstallError(f"failed to send the script to {command[0]}") from exc
    finally:
        returncode = process.wait()
        for reader in readers:
            reader.join()

    if returncode != 0:
        message = f"{command[0]} exited with status {returncode}"
        if stderr_lines:
            message += "\n\nError details:\n" + "\n".join(stderr_lines)
        raise TaskInstallError(message)


def install_task(
    config: Config,
    *,
    runner: Optional[ScriptRunner] = None,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Register the startup task for the given config.

    Raises:
        TaskInstallError: If the log path is unusable, the platform is not
            Windows (and no runner is given) or registration fails.
    """
    logger = logger or LOGGER
    try:
        args = build_task_args(config)
    except TempCleanerError as exc:
        raise TaskInstallError("invalid scheduled task options") from exc
    except OSError as exc:
        raise TaskInstallError("unable to prepare the log file for the scheduled task") from exc

    script = render_script(args)
    logger.debug("Task script:\n%s", script)

    if runner is not None:
        runner(script)
    elif os.name == "nt":
        run_script(script, logger=logger)
    else:
        raise TaskInstallError("scheduled task installation requires Windows PowerShell")
    logger.info("Installed scheduled task %s\\%s", TASK_NAME, TASK_NAME)
