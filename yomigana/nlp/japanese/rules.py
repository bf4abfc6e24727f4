"""Sound changes the analyzer and the dictionary miss when a numeral and a
counter end up in separate divisions (三 + 百 is さんびゃく, not さんひゃく)."""

from typing import Dict, List, Tuple

from yomigana.validate import RomajiSystem
from .characters import TextType
from .division import Division

# (trigger, preceding) -> (preceding reading, trigger reading)
COUNTER_READINGS: Dict[Tuple[str, str], Tuple[str, str]] = {
    # hundreds
    ("百", "三"): ("さん", "びゃく"),
    ("百", "四"): ("よん", "ひゃく"),
    ("百", "六"): ("ろっ", "ぴゃく"),
    ("百", "七"): ("なな", "ひゃく"),
    ("百", "八"): ("はっ", "ぴゃく"),
    ("百", "九"): ("きゅう", "ひゃく"),
    # thousands
    ("千", "三"): ("さん", "ぜん"),
    ("千", "四"): ("よん", "せん"),
    ("千", "七"): ("なな", "せん"),
    ("千", "八"): ("はっ", "せん"),
    ("千", "九"): ("きゅう", "せん"),
    # o'clock
    ("時", "一"): ("いち", "じ"),
    ("時", "二"): ("に", "じ"),
    ("時", "三"): ("さん", "じ"),
    ("時", "四"): ("よ", "じ"),
    ("時", "五"): ("ご", "じ"),
    ("時", "六"): ("ろく", "じ"),
    ("時", "七"): ("しち", "じ"),
    ("時", "八"): ("はち", "じ"),
    ("時", "九"): ("く", "じ"),
    ("時", "十"): ("じゅう", "じ"),
    # minutes
    ("分", "一"): ("いっ", "ぷん"),
    ("分", "二"): ("に", "ふん"),
    ("分", "三"): ("さん", "ぷん"),
    ("分", "四"): ("よん", "ぷん"),
    ("分", "五"): ("ご", "ふん"),
    ("分", "六"): ("ろっ", "ぷん"),
    ("分", "七"): ("なな", "ふん"),
    ("分", "八"): ("はっ", "ぷん"),
    ("分", "九"): ("きゅう", "ふん"),
    ("分", "十"): ("じゅっ", "ぷん"),
    # long objects
    ("本", "一"): ("いっ", "ぽん"),
    ("本", "三"): ("さん", "ぼん"),
    ("本", "六"): ("ろっ", "ぽん"),
    ("本", "八"): ("はっ", "ぽん"),
    ("本", "十"): ("じゅっ", "ぽん"),
    # small animals
    ("匹", "一"): ("いっ", "ぴき"),
    ("匹", "三"): ("さん", "びき"),
    ("匹", "六"): ("ろっ", "ぴき"),
    ("匹", "八"): ("はっ", "ぴき"),
    ("匹", "十"): ("じゅっ", "ぴき"),
}

COUNTER_TRIGGERS = frozenset(trigger for trigger, _ in COUNTER_READINGS)


def apply_counter_readings(divisions: List[Division], system: RomajiSystem) -> int:
    """Rewrite numeral + counter pairs in place; returns the number of pairs changed.

    A pair is the first element of a division whose spelling is a counter
    and the sole element of the division right before it.
    """
    changed = 0
    for prev, current in zip(divisions, divisions[1:]):
        trigger = current[0]
        if trigger.type != TextType.pure_kanji or trigger.spelling not in COUNTER_TRIGGERS:
            continue
        if len(prev) != 1:
            continue

        rewrite = COUNTER_READINGS.get((trigger.spelling, prev[0].spelling))
        if rewrite is None:
            continue

        prev_reading, trigger_reading = rewrite
        prev[0].set_reading(prev_reading, system)
        trigger.set_reading(trigger_reading, system)
        changed += 1
    return changed
