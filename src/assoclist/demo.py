import logging
import time

from assoclist.alist import AssociativeList

logger = logging.getLogger(__name__)


def _check(cond: bool, msg: str) -> None:
    # Not `assert`: the checks must still run under `python -O`.
    if not cond:
        raise AssertionError(msg)


def run_demo() -> AssociativeList[str, int]:
    """Exercise every associative list operation, checking the result of each.

    Any failed check raises ``AssertionError``, even when Python runs with
    assertions disabled. The emptied list is returned when all checks pass."""
    start = time.perf_counter_ns()
    m: AssociativeList[str, int] = AssociativeList()

    logger.debug("Inserting apple, banana and orange")
    m.insert("apple", 2)
    m.insert("banana", 3)
    m.insert("orange", 5)

    _check(m.get("apple") == 2, "get('apple') should be 2")
    _check(m.get("banana") == 3, "get('banana') should be 3")
    _check(m.get("orange") == 5, "get('orange') should be 5")

    _check(m.contains_key("apple") is True, "apple should be present")
    _check(m.contains_key("banana") is True, "banana should be present")
    _check(m.contains_key("orange") is True, "orange should be present")
    _check(m.contains_key("grape") is False, "grape should be absent")

    _check(len(m) == 3, "list should hold 3 entries")

    logger.debug("Removing banana")
    m.remove("banana")

    _check(m.contains_key("banana") is False, "banana should be removed")
    _check(m.is_empty() is False, "list should not be empty")
    _check(len(m) == 2, "list should hold 2 entries")

    logger.debug("Removing apple and orange")
    m.remove("apple")
    m.remove("orange")

    _check(m.is_empty() is True, "list should be empty")
    _check(len(m) == 0, "list should hold no entries")

    logger.debug("Demonstration finished in %d ns", time.perf_counter_ns() - start)
    return m
