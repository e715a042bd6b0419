"""Centralized script documents used across scanner/resolve/typecheck tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap


@dataclass(frozen=True, slots=True)
class ScriptCase:
    name: str
    source: str

    @property
    def lines(self) -> list[str]:
        return self.source.split("\n")


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


CHARACTER_EVENT = ScriptCase(
    name="character_event",
    source=_dedent(
        """
        my_events.0001 = {
            type = character_event
            trigger = {
                liege = {
                    is_ruler = yes
                }
            }
            immediate = {
                primary_title = {
                    holder = {

                    }
                }
            }
            option = {
                ai_chance = {
                    modifier = {

                    }
                }
            }
        }
        """
    ),
)

INLINE_BLOCKS = ScriptCase(
    name="inline_blocks",
    source="namespace_event = {\n\tif = { limit = { } }\n",
)

ANONYMOUS_BLOCK = ScriptCase(
    name="anonymous_block",
    source=_dedent(
        """
        my_events.0002 = {
            immediate = {
                values = { { 1 2 } }

            }
        }
        """
    ),
)

SCOPE_CHAINS = ScriptCase(
    name="scope_chains",
    source=_dedent(
        """
        my_events.0003 = {
            trigger = {
                liege.primary_title.holder = { is_ruler = yes }
                liege.nonexistent_link = { is_ruler = yes }
                scope:actor.whatever = yes
            }
            immediate = {
                set_variable = { name = x value = 0.5 }
            }
        }
        """
    ),
)

SKIPPED_DOTTED_KEYS = ScriptCase(
    name="skipped_dotted_keys",
    source=_dedent(
        """
        k_france = {
            1066.1.1 = {
                holder = 0
            }
            $TARGET$.liege = { is_ruler = yes }
            title:k_france.holder = { is_ruler = yes }
        }
        """
    ),
)
