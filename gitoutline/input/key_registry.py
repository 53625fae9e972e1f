"""Normal-mode key table: bindings in help order plus a normalized lookup."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

KeyHandler = Callable[[], "bool | None"]


@dataclass(frozen=True)
class KeyComboBinding:
    """One action reachable through any of ``combos``."""

    combos: tuple[str, ...]
    handler: KeyHandler
    description: str = ""


class KeyComboRegistry:
    """Bindings are kept in registration order; a later combo wins on lookup."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        self._normalize = normalize or str
        self._bindings: list[KeyComboBinding] = []
        self._by_key: dict[str, KeyComboBinding] = {}

    def register_binding(self, binding: KeyComboBinding) -> KeyComboRegistry:
        self._bindings.append(binding)
        self._by_key.update((self._normalize(combo), binding) for combo in binding.combos)
        return self

    def register_bindings(self, *bindings: KeyComboBinding) -> KeyComboRegistry:
        for binding in bindings:
            self.register_binding(binding)
        return self

    def bindings(self) -> list[KeyComboBinding]:
        return list(self._bindings)

    def dispatch(self, key: str) -> bool | None:
        """Run the handler bound to ``key``.

        Returns ``None`` when nothing is bound. A handler returning ``None``
        counts as handled; handlers that may decline return ``False``.
        """
        binding = self._by_key.get(self._normalize(key))
        if binding is None:
            return None
        handled = binding.handler()
        return True if handled is None else handled
