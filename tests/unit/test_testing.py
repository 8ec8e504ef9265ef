from __future__ import annotations

import pytest

from lib_throw.exceptions import RuntimeException
from lib_throw.testing import FAILURE_MESSAGE, i_should_fail


def test_i_should_fail_raises_runtime_exception() -> None:
    with pytest.raises(RuntimeException, match="^i should fail$") as caught:
        i_should_fail()
    assert caught.value.message == FAILURE_MESSAGE
    assert dict(caught.value.context) == {"source": "i_should_fail"}
