import pytest

from ats_keywords import (
    JobDescriptionParser,
    KeywordEngine,
    LearnedKeywordStore,
    MemoryStorage,
    NeverFlushPolicy,
)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def engine(storage):
    """
    Engine with learning switched off, so repeated calls see the same learned
    store and results stay comparable.
    """
    eng = KeywordEngine(
        store=LearnedKeywordStore(storage),
        parser=JobDescriptionParser(),
        flush_policy=NeverFlushPolicy(),
        learning=False,
    )
    yield eng
    eng.store.close()


@pytest.fixture
def learning_engine(storage):
    eng = KeywordEngine(
        store=LearnedKeywordStore(storage),
        parser=None,
        flush_policy=NeverFlushPolicy(),
        learning=True,
    )
    yield eng
    eng.store.close()
