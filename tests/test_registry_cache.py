import pytest

from rdapclient.bootstrap.cache.registry_cache import FileState


@pytest.mark.parametrize(
    "state, label",
    [
        (FileState.ABSENT, "not cached"),
        (FileState.GOOD, "good"),
        (FileState.SHOULD_RELOAD, "good"),
        (FileState.EXPIRED, "expired"),
    ],
)
def test_file_state_labels(state, label):
    assert str(state) == label


@pytest.mark.parametrize(
    "state, other",
    [
        (FileState.SHOULD_RELOAD, FileState.GOOD),
        (FileState.ABSENT, FileState.EXPIRED),
    ],
)
def test_states_are_distinct(state, other):
    assert state != other
    assert FileState(state.value) is state