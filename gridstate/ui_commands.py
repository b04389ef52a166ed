"""User-interface commands forwarded to the editor process."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

logger = logging.getLogger(__name__)


class NvimClient(Protocol):
    async def input(self, keys: str) -> Any: ...

    async def input_mouse(
        self, button: str, action: str, modifier: str, grid: int, row: int, col: int
    ) -> Any: ...

    async def command(self, command: str) -> Any: ...

    async def ui_try_resize(self, width: int, height: int) -> Any: ...


class SerialCommand:
    """A command that must finish before the next serial command starts."""

    __slots__ = ()

    async def execute(self, nvim: NvimClient) -> None:
        raise NotImplementedError


class ParallelCommand:
    """A command that may run concurrently with others."""

    __slots__ = ()

    async def execute(self, nvim: NvimClient) -> None:
        raise NotImplementedError


@dataclass
class Keyboard(SerialCommand):
    input_command: str

    async def execute(self, nvim: NvimClient) -> None:
        logger.debug("Keyboard Input Sent: %s", self.input_command)
        await nvim.input(self.input_command)


@dataclass
class MouseButton(SerialCommand):
    button: str
    action: str
    grid_id: int
    position: tuple[int, int]
    modifier_string: str

    async def execute(self, nvim: NvimClient) -> None:
        grid_x, grid_y = self.position
        await nvim.input_mouse(
            self.button, self.action, self.modifier_string, self.grid_id, grid_y, grid_x
        )


@dataclass
class MouseScroll(SerialCommand):
    direction: str
    grid_id: int
    position: tuple[int, int]
    modifier_string: str

    async def execute(self, nvim: NvimClient) -> None:
        grid_x, grid_y = self.position
        await nvim.input_mouse(
            "wheel", self.direction, self.modifier_string, self.grid_id, grid_y, grid_x
        )


@dataclass
class MouseDrag(SerialCommand):
    button: str
    grid_id: int
    position: tuple[int, int]
    modifier_string: str

    async def execute(self, nvim: NvimClient) -> None:
        grid_x, grid_y = self.position
        await nvim.input_mouse(
            self.button, "drag", self.modifier_string, self.grid_id, grid_y, grid_x
        )


@dataclass
class Quit(ParallelCommand):
    async def execute(self, nvim: NvimClient) -> None:
        try:
            await nvim.command("qa!")
        except Exception as error:  # the process is going away anyway
            logger.debug("Quit command failed: %s", error)


@dataclass
class ResizeUi(ParallelCommand):
    width: int
    height: int

    async def execute(self, nvim: NvimClient) -> None:
        """Resize the UI, never below 10 columns by 3 rows."""
        await nvim.ui_try_resize(max(self.width, 10), max(self.height, 3))


@dataclass
class FileDrop(ParallelCommand):
    path: str

    async def execute(self, nvim: NvimClient) -> None:
        try:
            await nvim.command(f"e {self.path}")
        except Exception as error:
            logger.debug("Opening dropped file failed: %s", error)


@dataclass
class FocusLost(ParallelCommand):
    async def execute(self, nvim: NvimClient) -> None:
        await nvim.command("if exists('#FocusLost') | doautocmd <nomodeline> FocusLost | endif")


@dataclass
class FocusGained(ParallelCommand):
    async def execute(self, nvim: NvimClient) -> None:
        await nvim.command(
            "if exists('#FocusGained') | doautocmd <nomodeline> FocusGained | endif"
        )


async def run_ui_command_handler(
    ui_command_receiver: "asyncio.Queue[Optional[SerialCommand | ParallelCommand]]",
    nvim: NvimClient,
) -> None:
    """Dispatch UI commands until ``None`` is received.

    Serial commands run one at a time in arrival order; parallel commands each
    run in their own task. Returns once all started work has finished.
    """
    serial_queue: asyncio.Queue[Optional[SerialCommand]] = asyncio.Queue()
    parallel_tasks: set[asyncio.Task[None]] = set()

    async def serial_worker() -> None:
        while (command := await serial_queue.get()) is not None:
            await command.execute(nvim)

    worker = asyncio.create_task(serial_worker())
    try:
        while (command := await ui_command_receiver.get()) is not None:
            if isinstance(command, SerialCommand):
                serial_queue.put_nowait(command)
            elif isinstance(command, ParallelCommand):
                task = asyncio.create_task(command.execute(nvim))
                parallel_tasks.add(task)
                task.add_done_callback(parallel_tasks.discard)
            else:
                raise TypeError(f"not a ui command: {command!r}")
    finally:
        serial_queue.put_nowait(None)

    pending = list(parallel_tasks)
    await worker
    for result in await asyncio.gather(*pending, return_exceptions=True):
        if isinstance(result, BaseException):
            logger.error("Parallel ui command failed: %s", result)