from dataclasses import replace

from .state import InputState

# Browser-style key names -> InputState field
KEY_FIELDS = {
    "ArrowUp": "up",
    "ArrowDown": "down",
    "ArrowLeft": "left",
    "ArrowRight": "right",
}


def _set_key(state: InputState, key_name: str, pressed: bool) -> InputState:
    name = KEY_FIELDS.get(key_name)
    if name is None:
        return state  # unknown keys are ignored
    return replace(state, **{name: pressed})


def set_key_down(state: InputState, key_name: str) -> InputState:
    return _set_key(state, key_name, True)


def set_key_up(state: InputState, key_name: str) -> InputState:
    return _set_key(state, key_name, False)
