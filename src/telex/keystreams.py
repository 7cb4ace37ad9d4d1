# SPDX-FileCopyrightText: 2021 Rose Davidson <rose@metaclassical.com>
#
# SPDX-License-Identifier: GPL-3.0-or-later
from __future__ import annotations

import abc
from contextlib import aclosing, asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterable, cast

import msgspec
import trio

from .editor import TelexInput

if TYPE_CHECKING:
    from .settings import Settings

BACKSPACE = "\b"


class Keystroke(msgspec.Struct, frozen=True):
    character: str


class Backspace(msgspec.Struct, frozen=True):
    pass


class Paste(msgspec.Struct, frozen=True):
    text: str


class MoveCaret(msgspec.Struct, frozen=True):
    index: int


class Clear(msgspec.Struct, frozen=True):
    pass


EditingEvent = Keystroke | Backspace | Paste | MoveCaret | Clear


class BufferSnapshot(msgspec.Struct, frozen=True):
    text: str
    caret: int


class Section(abc.ABC):
    """One stage of the typing pipeline: reads events from source, writes results to sink."""

    @abc.abstractmethod
    async def pump(self, source: trio.MemoryReceiveChannel[Any], sink: trio.MemorySendChannel[Any]): ...


# stage 1: split raw typed text into one event per keystroke
class SplitCharacters(Section):
    async def pump(self, source: trio.MemoryReceiveChannel[str], sink: trio.MemorySendChannel[EditingEvent]):
        async with aclosing(source), aclosing(sink):
            async for chunk in source:
                for character in chunk:
                    if character == BACKSPACE:
                        await sink.send(Backspace())
                    else:
                        await sink.send(Keystroke(character))


# stage 2: apply each event to the input field and report the result
class TelexEditing(Section):
    def __init__(self, telex_input: TelexInput):
        self.telex_input = telex_input

    def _handle(self, event: EditingEvent):
        match event:
            case Keystroke(character=character):
                self.telex_input.keystroke(character)
            case Backspace():
                self.telex_input.backspace()
            case Paste(text=text):
                self.telex_input.paste(text)
            case MoveCaret(index=index):
                self.telex_input.move_caret(index)
            case Clear():
                self.telex_input.clear()
            case _:
                raise NotImplementedError(f"Don't know how to handle {type(event)}.")

    async def pump(self, source: trio.MemoryReceiveChannel[EditingEvent], sink: trio.MemorySendChannel[BufferSnapshot]):
        async with aclosing(source), aclosing(sink):
            async for event in source:
                self._handle(event)
                await sink.send(BufferSnapshot(text=self.telex_input.text, caret=self.telex_input.caret))


@asynccontextmanager
async def pump_all(first_source: AsyncIterable[Any], *sections: Section):
    """Chain sections so raw typed text flows through to buffer snapshots; yields the last channel."""
    async with trio.open_nursery() as nursery:
        section_input = first_source
        for section in sections:
            section_send_channel, section_receive_channel = trio.open_memory_channel(0)
            nursery.start_soon(section.pump, section_input, section_send_channel)
            section_input = section_receive_channel
        yield section_input
        nursery.cancel_scope.cancel()


@asynccontextmanager
async def make_keystream(
    text_channel: trio.MemoryReceiveChannel[str],
    settings: Settings,
    telex_input: TelexInput | None = None,
):
    if telex_input is None:
        telex_input = TelexInput(settings)
    sections = [
        SplitCharacters(),
        TelexEditing(telex_input),
    ]

    async with pump_all(text_channel, *sections) as keystream:
        yield cast("trio.MemoryReceiveChannel[BufferSnapshot]", keystream)
