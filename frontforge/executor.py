"""JavaScript package manager executors.

This module provides executor classes for the supported package managers
(npm, Yarn, pnpm, Bun) to install the dependencies of a generated project.
"""

import logging
import shutil
from abc import ABC, abstractmethod
from collections import deque
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import anyio
from anyio.streams.text import TextReceiveStream

from frontforge.config import PackageManager
from frontforge.exceptions import ExecutableNotFoundError, InstallError

if TYPE_CHECKING:
    from collections.abc import Callable

    from anyio.abc import ByteReceiveStream

__all__ = (
    "BunExecutor",
    "CommandExecutor",
    "JSExecutor",
    "NodeExecutor",
    "PnpmExecutor",
    "YarnExecutor",
    "get_executor",
)

logger = logging.getLogger(__name__)

STDERR_TAIL_LINES = 50
"""Number of trailing stderr lines attached to an :class:`InstallError`."""


class JSExecutor(ABC):
    """Abstract base class for package manager executors."""

    bin_name: ClassVar[str]
    install_args: ClassVar[tuple[str, ...]] = ("install",)

    def __init__(self, executable_path: "Path | str | None" = None) -> None:
        self.executable_path = executable_path

    @abstractmethod
    def install(
        self,
        cwd: Path,
        *,
        on_line: "Callable[[str], None] | None" = None,
        timeout: "float | None" = None,
    ) -> None:
        """Install dependencies."""

    def _resolve_executable(self) -> str:
        if self.executable_path:
            return str(self.executable_path)
        path = shutil.which(self.bin_name)
        if path is None:
            raise ExecutableNotFoundError(self.bin_name)
        return path

    @property
    def install_command(self) -> list[str]:
        """Get the install command as shown to users (e.g., npm install)."""
        return [self.bin_name, *self.install_args]

    @property
    def dev_command(self) -> list[str]:
        """Get the command that starts the dev server (e.g., npm run dev)."""
        return [self.bin_name, "run", "dev"]

    @property
    def build_command(self) -> list[str]:
        """Get the command that builds for production (e.g., npm run build)."""
        return [self.bin_name, "run", "build"]


class CommandExecutor(JSExecutor):
    """Generic command executor.

    The child process's stdout and stderr are drained concurrently by two
    reader tasks; ordering between the two streams is not preserved.
    """

    def install(
        self,
        cwd: Path,
        *,
        on_line: "Callable[[str], None] | None" = None,
        timeout: "float | None" = None,
    ) -> None:
        """Run the package manager's install command in ``cwd``.

        Args:
            cwd: The project directory.
            on_line: Called with every output line, from either stream.
            timeout: Seconds to wait before the process is killed.

        Raises:
            ExecutableNotFoundError: If the executable is not on ``PATH``.
            InstallError: If the process times out, cannot start or exits non-zero.
        """
        command = [self._resolve_executable(), *self.install_args]
        logger.debug("Running %s in %s", command, cwd)
        anyio.run(self._install, command, cwd, on_line, timeout)

    async def _install(
        self,
        command: list[str],
        cwd: Path,
        on_line: "Callable[[str], None] | None",
        timeout: "float | None",
    ) -> None:
        stderr_tail: deque[str] = deque(maxlen=STDERR_TAIL_LINES)

        def _emit(line: str, keep: bool) -> None:
            if keep:
                stderr_tail.append(line)
            if on_line is not None:
                on_line(line)

        async def drain(stream: "ByteReceiveStream | None", keep: bool) -> None:
            if stream is None:
                return
            buffer = ""
            async for chunk in TextReceiveStream(stream, errors="replace"):
                buffer += chunk
                *lines, buffer = buffer.split("\n")
                for line in lines:
                    _emit(line.rstrip("\r"), keep)
            if buffer:
                _emit(buffer.rstrip("\r"), keep)

        try:
            async with await anyio.open_process(command, cwd=cwd) as process:
                try:
                    with anyio.fail_after(timeout):
                        async with anyio.create_task_group() as tg:
                            tg.start_soon(drain, process.stdout, False)
                            tg.start_soon(drain, process.stderr, True)
                        return_code = await process.wait()
                except TimeoutError as exc:
                    process.kill()
                    stderr_tail.append(f"timed out after {timeout} seconds")
                    raise InstallError(command, None, "\n".join(stderr_tail)) from exc
        except OSError as exc:
            raise InstallError(command, None, str(exc)) from exc
        if return_code != 0:
            raise InstallError(command, return_code, "\n".join(stderr_tail))


class NodeExecutor(CommandExecutor):
    """Node.js executor."""

    bin_name = "npm"


class YarnExecutor(CommandExecutor):
    """Yarn executor."""

    bin_name = "yarn"


class PnpmExecutor(CommandExecutor):
    """PNPM executor."""

    bin_name = "pnpm"


class BunExecutor(CommandExecutor):
    """Bun executor."""

    bin_name = "bun"


_EXECUTORS: dict[PackageManager, type[JSExecutor]] = {
    PackageManager.NPM: NodeExecutor,
    PackageManager.YARN: YarnExecutor,
    PackageManager.PNPM: PnpmExecutor,
    PackageManager.BUN: BunExecutor,
}


def get_executor(package_manager: "PackageManager | str", executable_path: "Path | str | None" = None) -> JSExecutor:
    """Return the executor for a package manager.

    Args:
        package_manager: The package manager, as a member or its value.
        executable_path: Explicit executable path, bypassing the ``PATH`` lookup.

    Returns:
        A new executor instance.
    """
    return _EXECUTORS[PackageManager(package_manager)](executable_path)
