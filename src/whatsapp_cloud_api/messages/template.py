"""Componentes de template e montagem da lista `components`."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

ButtonParameter = Mapping[str, Any] | str

BUTTON_SUB_TYPE_QUICK_REPLY = "quick_reply"


@dataclass(frozen=True)
class TemplateComponents:
    """Parâmetros de header, body e botões de um template aprovado.

    Cada parâmetro é um mapping opaco (ex: {"type": "text", "text": "..."}).
    Um botão informado como string equivale a {"type": "text", "text": <str>}.
    A ordem dos botões define o `index` emitido.
    """

    header: Sequence[Mapping[str, Any]] = field(default_factory=tuple)
    body: Sequence[Mapping[str, Any]] = field(default_factory=tuple)
    buttons: Sequence[ButtonParameter] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "header", tuple(self.header or ()))
        object.__setattr__(self, "body", tuple(self.body or ()))
        object.__setattr__(self, "buttons", tuple(self.buttons or ()))

    @property
    def is_empty(self) -> bool:
        return not (self.header or self.body or self.buttons)


def _button_leaf(parameter: ButtonParameter) -> dict[str, Any]:
    if isinstance(parameter, str):
        return {"type": "text", "text": parameter}
    return dict(parameter)


def build_template_components(
    components: TemplateComponents | None,
) -> list[dict[str, Any]]:
    """Monta a lista `components` do template.

    Ordem fixa: header, body e depois um descritor por botão
    (sub_type quick_reply, index a partir de 0). Listas vazias são omitidas;
    tudo vazio resulta em [].

    Args:
        components: Parâmetros do template (None equivale a vazio)

    Returns:
        Lista de descritores conforme API Meta
    """
    if components is None:
        return []

    result: list[dict[str, Any]] = []

    if components.header:
        result.append({
            "type": "header",
            "parameters": [dict(p) for p in components.header],
        })

    if components.body:
        result.append({
            "type": "body",
            "parameters": [dict(p) for p in components.body],
        })

    for index, button in enumerate(components.buttons):
        result.append({
            "type": "button",
            "sub_type": BUTTON_SUB_TYPE_QUICK_REPLY,
            "index": index,
            "parameters": [_button_leaf(button)],
        })

    return result
