import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from socioai.core.resource_list import LoadState, ResourceList
from socioai.utils.exceptions import NetworkError


def test_starts_idle():
    slot = ResourceList("categorias")
    assert slot.state == LoadState.IDLE
    assert slot.items == []


def test_successful_load():
    slot = ResourceList("categorias")

    assert slot.load(lambda: [1, 2]) == [1, 2]
    assert slot.state == LoadState.LOADED
    assert slot.error is None


def test_failed_load_keeps_previous_items():
    slot = ResourceList("categorias")
    slot.load(lambda: ["old"])

    def boom():
        raise NetworkError("down")

    with pytest.raises(NetworkError):
        slot.load(boom)

    assert slot.state == LoadState.LOAD_ERROR
    assert isinstance(slot.error, NetworkError)
    assert slot.items == ["old"]


def test_reload_after_error_recovers():
    slot = ResourceList("categorias")
    gen = slot.begin()
    slot.fail(gen, NetworkError("down"))

    slot.load(lambda: ["new"])

    assert slot.state == LoadState.LOADED
    assert slot.error is None


def test_stale_response_is_discarded():
    slot = ResourceList("categorias")
    first = slot.begin()
    second = slot.begin()

    assert slot.complete(second, ["fresh"])
    assert not slot.complete(first, ["stale"])
    assert not slot.fail(first, NetworkError("late"))
    assert slot.items == ["fresh"]
    assert slot.state == LoadState.LOADED


def test_loading_state_during_fetch():
    slot = ResourceList("categorias")
    seen = []
    slot.load(lambda: seen.append(slot.is_loading) or [])

    assert seen == [True]
    assert not slot.is_loading


def test_load_async_out_of_order_responses():
    slot = ResourceList("categorias")
    release_slow = threading.Event()

    def slow():
        release_slow.wait(timeout=5)
        return ["slow"]

    with ThreadPoolExecutor(max_workers=2) as executor:
        slow_future = slot.load_async(slow, executor)
        fast_future = slot.load_async(lambda: ["fast"], executor)
        assert fast_future.result(timeout=5) == ["fast"]
        release_slow.set()
        slow_future.result(timeout=5)

    assert slot.items == ["fast"]
    assert slot.state == LoadState.LOADED


def test_load_async_failure_marks_slot():
    slot = ResourceList("categorias")

    def boom():
        raise NetworkError("down")

    with ThreadPoolExecutor(max_workers=1) as executor:
        future = slot.load_async(boom, executor)
        with pytest.raises(NetworkError):
            future.result(timeout=5)

    assert slot.state == LoadState.LOAD_ERROR
