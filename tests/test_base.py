"""Unit tests for ldagibbs/base.py (ModelState) and ldagibbs/random_source.py."""

import numpy as np
import pytest

from ldagibbs import InvalidTopic, ModelState, RandomSource


def _state(dtm, n_topic=3, seed=0):
    doc_ids, word_ids = dtm.token_stream()
    state = ModelState(doc_ids, word_ids, dtm.n_doc, dtm.n_voca, n_topic)
    state.random_init(RandomSource(seed))
    return state


# ---------------------------------------------------------------------------
# ModelState
# ---------------------------------------------------------------------------

class TestModelState:
    def test_random_init_is_consistent(self, two_cluster_dtm):
        state = _state(two_cluster_dtm)
        assert state.initialized
        assert state.is_consistent()
        assert np.array_equal(state.doc_total, two_cluster_dtm.doc_lengths)
        assert state.topic_total.sum() == two_cluster_dtm.n_token

    def test_reassign_moves_one_token(self, two_cluster_dtm):
        state = _state(two_cluster_dtm)
        position = 5
        doc, word = state.doc_ids[position], state.word_ids[position]
        old = state.topic_assignment[position]
        new = (old + 1) % state.n_topic
        doc_topic = state.doc_topic.copy()
        topic_term = state.topic_term.copy()

        state.reassign(position, doc, word, new)

        assert state.topic_assignment[position] == new
        assert state.doc_topic[doc, old] == doc_topic[doc, old] - 1
        assert state.doc_topic[doc, new] == doc_topic[doc, new] + 1
        assert state.topic_term[old, word] == topic_term[old, word] - 1
        assert state.topic_term[new, word] == topic_term[new, word] + 1
        assert state.is_consistent()

    def test_reassign_same_topic_is_noop(self, two_cluster_dtm):
        state = _state(two_cluster_dtm)
        before = state.topic_term.copy()
        state.reassign(0, state.doc_ids[0], state.word_ids[0], state.topic_assignment[0])
        assert np.array_equal(before, state.topic_term)

    def test_reassign_rejects_out_of_range_topic(self, two_cluster_dtm):
        state = _state(two_cluster_dtm)
        with pytest.raises(InvalidTopic):
            state.reassign(0, state.doc_ids[0], state.word_ids[0], 3)
        assert state.is_consistent()

    def test_reassign_rejects_mismatched_token(self, two_cluster_dtm):
        state = _state(two_cluster_dtm)
        with pytest.raises(ValueError):
            state.reassign(0, state.doc_ids[0], state.word_ids[0] + 1, 0)

    def test_count_tables_are_read_only(self, two_cluster_dtm):
        state = _state(two_cluster_dtm)
        with pytest.raises(ValueError):
            state.doc_topic[0, 0] += 1
        with pytest.raises(ValueError):
            state.topic_assignment[0] = 1

    def test_excluded_counts_remove_own_token(self, two_cluster_dtm):
        state = _state(two_cluster_dtm)
        position = 3
        doc, word = state.doc_ids[position], state.word_ids[position]
        topic = state.topic_assignment[position]
        doc_topic, topic_word, topic_total = state.excluded_counts(position)

        assert doc_topic[topic] == state.doc_topic[doc, topic] - 1
        assert topic_word[topic] == state.topic_term[topic, word] - 1
        assert topic_total[topic] == state.topic_total[topic] - 1
        assert doc_topic.sum() == state.doc_total[doc] - 1
        assert state.is_consistent()

    def test_mismatched_stream_lengths(self):
        with pytest.raises(ValueError):
            ModelState([0, 0, 1], [0, 1], 2, 2, 2)


# ---------------------------------------------------------------------------
# RandomSource
# ---------------------------------------------------------------------------

class TestRandomSource:
    def test_same_seed_same_draws(self):
        a, b = RandomSource(3), RandomSource(3)
        weights = np.array([0.2, 1.0, 3.0, 0.5])
        assert [a.categorical(weights) for _ in range(50)] == [b.categorical(weights) for _ in range(50)]
        assert a.uniform() == b.uniform()

    def test_uniform_range(self):
        rng = RandomSource(0)
        draws = [rng.uniform() for _ in range(1000)]
        assert min(draws) >= 0.0
        assert max(draws) < 1.0

    def test_categorical_never_returns_zero_weight(self):
        rng = RandomSource(0)
        weights = np.array([0.0, 2.0, 0.0, 1.0, 0.0])
        draws = {rng.categorical(weights) for _ in range(500)}
        assert draws == {1, 3}

    def test_categorical_frequencies(self):
        rng = RandomSource(1)
        weights = np.array([1.0, 3.0])
        draws = np.array([rng.categorical(weights) for _ in range(4000)])
        assert draws.mean() == pytest.approx(0.75, abs=0.03)

    def test_categorical_unnormalised_scale_free(self):
        a, b = RandomSource(9), RandomSource(9)
        assert [a.categorical([1, 2, 3]) for _ in range(30)] == [b.categorical([10, 20, 30]) for _ in range(30)]

    @pytest.mark.parametrize("weights", [[0.0, 0.0], [1.0, -0.5], [np.nan, 1.0], [np.inf, 1.0], []])
    def test_categorical_rejects_bad_weights(self, weights):
        with pytest.raises(ValueError):
            RandomSource(0).categorical(weights)

    def test_randint_range(self):
        draws = RandomSource(0).randint(4, size=200)
        assert set(draws.tolist()) <= {0, 1, 2, 3}
