import pytest

from dotgraph.errors import DotGraphError, DotSyntaxError, RelationCycleError, UnknownScopeError


class TestUnknownScopeError:
    def test_names_the_scope(self):
        err = UnknownScopeError("cluster_x")
        assert err.name == "cluster_x"
        assert "cluster_x" in str(err)
        assert isinstance(err, DotGraphError)


class TestRelationCycleError:
    def test_path(self):
        err = RelationCycleError(["a", "b", "a"])
        assert err.path == ["a", "b", "a"]
        assert str(err) == "subgraph relation cycle: a -> b -> a"


class TestDotSyntaxError:
    def test_position_in_message(self):
        err = DotSyntaxError("Expected LBRACE", position=7)
        assert err.position == 7
        assert str(err) == "Expected LBRACE at 7"

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            raise DotSyntaxError("bad")
