import pytest

from flownet.types import FlowAlgorithm


class TestFlowAlgorithm:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("edmonds_karp", FlowAlgorithm.EDMONDS_KARP),
            ("Edmonds-Karp", FlowAlgorithm.EDMONDS_KARP),
            ("edmonds karp", FlowAlgorithm.EDMONDS_KARP),
            ("DINIC", FlowAlgorithm.DINIC),
            ("push-relabel", FlowAlgorithm.PUSH_RELABEL),
            ("  push_relabel ", FlowAlgorithm.PUSH_RELABEL),
        ],
    )
    def test_from_string(self, name, expected):
        assert FlowAlgorithm.from_string(name) is expected

    def test_from_string_invalid_lists_choices(self):
        with pytest.raises(ValueError) as exc:
            FlowAlgorithm.from_string("boykov")
        message = str(exc.value)
        assert "EDMONDS_KARP" in message
        assert "DINIC" in message
        assert "PUSH_RELABEL" in message

    def test_members_are_closed_set(self):
        assert [a.name for a in FlowAlgorithm] == [
            "EDMONDS_KARP",
            "DINIC",
            "PUSH_RELABEL",
        ]
