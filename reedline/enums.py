"""Signals, edit commands, undo behaviours and editor events."""

from __future__ import annotations

import enum
from typing import Any, ClassVar


class SignalKind(enum.Enum):
    """The ways a line read can end."""

    SUCCESS = "Success"
    CTRL_C = "CtrlC"
    CTRL_D = "CtrlD"


class Signal:
    """Outcome of reading a line: the entered text, or an abort."""

    __slots__ = ("kind", "content")

    def __init__(self, kind: SignalKind, content: str | None = None) -> None:
        if not isinstance(kind, SignalKind):
            raise TypeError(f"expected a SignalKind, got {kind!r}")
        if kind is SignalKind.SUCCESS:
            if not isinstance(content, str):
                raise TypeError("a successful signal carries the entered text")
        elif content is not None:
            raise TypeError(f"{kind.value} carries no content")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "content", content)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Signal is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Signal):
            return NotImplemented
        return (self.kind, self.content) == (other.kind, other.content)

    def __hash__(self) -> int:
        return hash((self.kind, self.content))

    def __repr__(self) -> str:
        if self.content is None:
            return f"Signal({self.kind.name})"
        return f"Signal({self.kind.name}, {self.content!r})"


class _Param(enum.Enum):
    CHAR = "char"
    INDEX = "int"
    TEXT = "string"
    U16 = "u16"
    COMMANDS = "commands"
    EVENTS = "events"


def _check_param(param: _Param, value: Any) -> Any:
    if param is _Param.CHAR:
        if not isinstance(value, str):
            raise TypeError(f"expected a character, got {value!r}")
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    if param is _Param.TEXT:
        if not isinstance(value, str):
            raise TypeError(f"expected a string, got {value!r}")
        return value
    if param in (_Param.INDEX, _Param.U16):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected an integer, got {value!r}")
        if value < 0 or (param is _Param.U16 and value > 0xFFFF):
            raise ValueError(f"integer out of range: {value}")
        return value
    items = tuple(value)
    wanted = EditCommand if param is _Param.COMMANDS else ReedlineEvent
    for item in items:
        if not isinstance(item, wanted):
            raise TypeError(f"expected {wanted.__name__} items, got {item!r}")
    return items


class _Variant:
    """A tagged value: a kind plus the arguments that kind requires."""

    __slots__ = ("kind", "args")

    _KIND: ClassVar[type[enum.Enum]]
    _PARAMS: ClassVar[dict[Any, tuple[_Param, ...]]]

    def __init__(self, kind: Any, *args: Any) -> None:
        if not isinstance(kind, self._KIND):
            raise TypeError(f"expected a {self._KIND.__name__}, got {kind!r}")
        params = self._PARAMS.get(kind, ())
        if len(args) != len(params):
            raise TypeError(
                f"{kind.value} takes {len(params)} argument(s), got {len(args)}"
            )
        checked = tuple(_check_param(p, a) for p, a in zip(params, args))
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "args", checked)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.kind, self.args) == (other.kind, other.args)  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.kind, self.args))

    def __repr__(self) -> str:
        inner = ", ".join([self.kind.name, *(repr(a) for a in self.args)])
        return f"{type(self).__name__}({inner})"


class EditType(enum.Enum):
    """Groups edit commands by how they affect the undo stack."""

    MOVE_CURSOR = "MoveCursor"
    UNDO_REDO = "UndoRedo"
    EDIT_TEXT = "EditText"


class EditCommandKind(enum.Enum):
    """Every editing action that can be bound to a key."""

    MOVE_TO_START = "MoveToStart"
    MOVE_TO_LINE_START = "MoveToLineStart"
    MOVE_TO_END = "MoveToEnd"
    MOVE_TO_LINE_END = "MoveToLineEnd"
    MOVE_LEFT = "MoveLeft"
    MOVE_RIGHT = "MoveRight"
    MOVE_WORD_LEFT = "MoveWordLeft"
    MOVE_BIG_WORD_LEFT = "MoveBigWordLeft"
    MOVE_WORD_RIGHT = "MoveWordRight"
    MOVE_WORD_RIGHT_START = "MoveWordRightStart"
    MOVE_BIG_WORD_RIGHT_START = "MoveBigWordRightStart"
    MOVE_WORD_RIGHT_END = "MoveWordRightEnd"
    MOVE_BIG_WORD_RIGHT_END = "MoveBigWordRightEnd"
    MOVE_TO_POSITION = "MoveToPosition"
    INSERT_CHAR = "InsertChar"
    INSERT_STRING = "InsertString"
    INSERT_NEWLINE = "InsertNewline"
    REPLACE_CHAR = "ReplaceChar"
    REPLACE_CHARS = "ReplaceChars"
    BACKSPACE = "Backspace"
    DELETE = "Delete"
    CUT_CHAR = "CutChar"
    BACKSPACE_WORD = "BackspaceWord"
    DELETE_WORD = "DeleteWord"
    CLEAR = "Clear"
    CLEAR_TO_LINE_END = "ClearToLineEnd"
    CUT_CURRENT_LINE = "CutCurrentLine"
    CUT_FROM_START = "CutFromStart"
    CUT_FROM_LINE_START = "CutFromLineStart"
    CUT_TO_END = "CutToEnd"
    CUT_TO_LINE_END = "CutToLineEnd"
    CUT_WORD_LEFT = "CutWordLeft"
    CUT_BIG_WORD_LEFT = "CutBigWordLeft"
    CUT_WORD_RIGHT = "CutWordRight"
    CUT_BIG_WORD_RIGHT = "CutBigWordRight"
    CUT_WORD_RIGHT_TO_NEXT = "CutWordRightToNext"
    CUT_BIG_WORD_RIGHT_TO_NEXT = "CutBigWordRightToNext"
    PASTE_CUT_BUFFER_BEFORE = "PasteCutBufferBefore"
    PASTE_CUT_BUFFER_AFTER = "PasteCutBufferAfter"
    UPPERCASE_WORD = "UppercaseWord"
    LOWERCASE_WORD = "LowercaseWord"
    CAPITALIZE_CHAR = "CapitalizeChar"
    SWITCHCASE_CHAR = "SwitchcaseChar"
    SWAP_WORDS = "SwapWords"
    SWAP_GRAPHEMES = "SwapGraphemes"
    UNDO = "Undo"
    REDO = "Redo"
    CUT_RIGHT_UNTIL = "CutRightUntil"
    CUT_RIGHT_BEFORE = "CutRightBefore"
    MOVE_RIGHT_UNTIL = "MoveRightUntil"
    MOVE_RIGHT_BEFORE = "MoveRightBefore"
    CUT_LEFT_UNTIL = "CutLeftUntil"
    CUT_LEFT_BEFORE = "CutLeftBefore"
    MOVE_LEFT_UNTIL = "MoveLeftUntil"
    MOVE_LEFT_BEFORE = "MoveLeftBefore"


_E = EditCommandKind

_EDIT_PARAMS: dict[EditCommandKind, tuple[_Param, ...]] = {
    _E.MOVE_TO_POSITION: (_Param.INDEX,),
    _E.INSERT_CHAR: (_Param.CHAR,),
    _E.INSERT_STRING: (_Param.TEXT,),
    _E.REPLACE_CHAR: (_Param.CHAR,),
    _E.REPLACE_CHARS: (_Param.INDEX, _Param.TEXT),
    _E.CUT_RIGHT_UNTIL: (_Param.CHAR,),
    _E.CUT_RIGHT_BEFORE: (_Param.CHAR,),
    _E.MOVE_RIGHT_UNTIL: (_Param.CHAR,),
    _E.MOVE_RIGHT_BEFORE: (_Param.CHAR,),
    _E.CUT_LEFT_UNTIL: (_Param.CHAR,),
    _E.CUT_LEFT_BEFORE: (_Param.CHAR,),
    _E.MOVE_LEFT_UNTIL: (_Param.CHAR,),
    _E.MOVE_LEFT_BEFORE: (_Param.CHAR,),
}

_EDIT_DISPLAY: dict[EditCommandKind, str] = {
    _E.MOVE_TO_POSITION: "MoveToPosition  Value: <int>",
    _E.INSERT_CHAR: "InsertChar  Value: <char>",
    _E.INSERT_STRING: "InsertString Value: <string>",
    _E.REPLACE_CHAR: "ReplaceChar <char>",
    _E.REPLACE_CHARS: "ReplaceChars <int> <string>",
    **{
        kind: f"{kind.value} Value: <char>"
        for kind in (
            _E.CUT_RIGHT_UNTIL,
            _E.CUT_RIGHT_BEFORE,
            _E.MOVE_RIGHT_UNTIL,
            _E.MOVE_RIGHT_BEFORE,
            _E.CUT_LEFT_UNTIL,
            _E.CUT_LEFT_BEFORE,
            _E.MOVE_LEFT_UNTIL,
            _E.MOVE_LEFT_BEFORE,
        )
    },
}

_MOVE_COMMANDS = frozenset(
    {
        _E.MOVE_TO_START,
        _E.MOVE_TO_END,
        _E.MOVE_TO_LINE_START,
        _E.MOVE_TO_LINE_END,
        _E.MOVE_TO_POSITION,
        _E.MOVE_LEFT,
        _E.MOVE_RIGHT,
        _E.MOVE_WORD_LEFT,
        _E.MOVE_BIG_WORD_LEFT,
        _E.MOVE_WORD_RIGHT,
        _E.MOVE_WORD_RIGHT_START,
        _E.MOVE_BIG_WORD_RIGHT_START,
        _E.MOVE_WORD_RIGHT_END,
        _E.MOVE_BIG_WORD_RIGHT_END,
        _E.MOVE_RIGHT_UNTIL,
        _E.MOVE_RIGHT_BEFORE,
        _E.MOVE_LEFT_UNTIL,
        _E.MOVE_LEFT_BEFORE,
    }
)

_UNDO_REDO_COMMANDS = frozenset({_E.UNDO, _E.REDO})


class EditCommand(_Variant):
    """An editing action, e.g. ``EditCommand(EditCommandKind.INSERT_CHAR, "a")``."""

    __slots__ = ()
    _KIND = EditCommandKind
    _PARAMS = _EDIT_PARAMS

    def edit_type(self) -> EditType:
        """How this command should be treated by the undo stack."""
        if self.kind in _MOVE_COMMANDS:
            return EditType.MOVE_CURSOR
        if self.kind in _UNDO_REDO_COMMANDS:
            return EditType.UNDO_REDO
        return EditType.EDIT_TEXT

    def __str__(self) -> str:
        return _EDIT_DISPLAY.get(self.kind, self.kind.value)


class UndoKind(enum.Enum):
    """Kinds of buffer changes as seen by the undo stack."""

    INSERT_CHARACTER = "InsertCharacter"
    BACKSPACE = "Backspace"
    DELETE = "Delete"
    MOVE_CURSOR = "MoveCursor"
    HISTORY_NAVIGATION = "HistoryNavigation"
    CREATE_UNDO_POINT = "CreateUndoPoint"
    UNDO_REDO = "UndoRedo"


_LINE_BREAKS = ("\n", "\r")


class UndoBehavior:
    """Tag attached to every line change, deciding how it lands on the undo stack."""

    __slots__ = ("kind", "char")

    def __init__(self, kind: UndoKind, char: str | None = None) -> None:
        if not isinstance(kind, UndoKind):
            raise TypeError(f"expected an UndoKind, got {kind!r}")
        if kind is UndoKind.INSERT_CHARACTER:
            char = _check_param(_Param.CHAR, char)
        elif kind in (UndoKind.BACKSPACE, UndoKind.DELETE):
            if char is not None:
                char = _check_param(_Param.CHAR, char)
        elif char is not None:
            raise TypeError(f"{kind.value} carries no character")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "char", char)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("UndoBehavior is immutable")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UndoBehavior):
            return NotImplemented
        return (self.kind, self.char) == (other.kind, other.char)

    def __hash__(self) -> int:
        return hash((self.kind, self.char))

    def __repr__(self) -> str:
        if self.char is None:
            return f"UndoBehavior({self.kind.name})"
        return f"UndoBehavior({self.kind.name}, {self.char!r})"

    def create_undo_point_after(self, previous: UndoBehavior) -> bool:
        """Whether this change starts a new undo set after ``previous``."""
        new, prev = self, previous
        if new.kind is UndoKind.MOVE_CURSOR:
            return False
        if prev.kind is new.kind is UndoKind.HISTORY_NAVIGATION:
            return False
        if prev.kind is new.kind is UndoKind.INSERT_CHARACTER:
            return prev.char in _LINE_BREAKS or (
                not prev.char.isspace() and new.char.isspace()
            )
        if prev.kind is new.kind and new.kind in (UndoKind.BACKSPACE, UndoKind.DELETE):
            if prev.char is None or new.char is None:
                return False
            return new.char in _LINE_BREAKS or (
                prev.char.isspace() and not new.char.isspace()
            )
        return True


class ReedlineEventKind(enum.Enum):
    """Every action the line editor engine can react to."""

    NONE = "None"
    HISTORY_HINT_COMPLETE = "HistoryHintComplete"
    HISTORY_HINT_WORD_COMPLETE = "HistoryHintWordComplete"
    CTRL_D = "CtrlD"
    CTRL_C = "CtrlC"
    CLEAR_SCREEN = "ClearScreen"
    CLEAR_SCROLLBACK = "ClearScrollback"
    ENTER = "Enter"
    ESC = "Esc"
    MOUSE = "Mouse"
    RESIZE = "Resize"
    EDIT = "Edit"
    REPAINT = "Repaint"
    PREVIOUS_HISTORY = "PreviousHistory"
    UP = "Up"
    DOWN = "Down"
    RIGHT = "Right"
    LEFT = "Left"
    NEXT_HISTORY = "NextHistory"
    SEARCH_HISTORY = "SearchHistory"
    MULTIPLE = "Multiple"
    UNTIL_FOUND = "UntilFound"
    MENU = "Menu"
    MENU_NEXT = "MenuNext"
    MENU_PREVIOUS = "MenuPrevious"
    MENU_UP = "MenuUp"
    MENU_DOWN = "MenuDown"
    MENU_LEFT = "MenuLeft"
    MENU_RIGHT = "MenuRight"
    MENU_PAGE_NEXT = "MenuPageNext"
    MENU_PAGE_PREVIOUS = "MenuPagePrevious"
    EXECUTE_HOST_COMMAND = "ExecuteHostCommand"
    OPEN_EDITOR = "OpenEditor"
    RECORD_TO_TILL = "RecordToTill"


_R = ReedlineEventKind

_EVENT_PARAMS: dict[ReedlineEventKind, tuple[_Param, ...]] = {
    _R.RESIZE: (_Param.U16, _Param.U16),
    _R.EDIT: (_Param.COMMANDS,),
    _R.MULTIPLE: (_Param.EVENTS,),
    _R.UNTIL_FOUND: (_Param.EVENTS,),
    _R.MENU: (_Param.TEXT,),
    _R.EXECUTE_HOST_COMMAND: (_Param.TEXT,),
}

_EVENT_DISPLAY: dict[ReedlineEventKind, str] = {
    _R.RESIZE: "Resize <int> <int>",
    _R.EDIT: "Edit: <EditCommand> or Edit: <EditCommand> value: <string>",
    _R.MULTIPLE: "Multiple[ { ReedLineEvents, } ]",
    _R.UNTIL_FOUND: "UntilFound [ { ReedLineEvents, } ]",
    _R.MENU: "Menu Name: <string>",
}


class ReedlineEvent(_Variant):
    """An engine action, e.g. ``ReedlineEvent(ReedlineEventKind.MENU, "completion_menu")``."""

    __slots__ = ()
    _KIND = ReedlineEventKind
    _PARAMS = _EVENT_PARAMS

    def __str__(self) -> str:
        return _EVENT_DISPLAY.get(self.kind, self.kind.value)