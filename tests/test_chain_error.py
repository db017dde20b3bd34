import pickle

import pytest

from errchain import ChainError, Result, is_chain_error, message_of, wrap


def _root_of(err):
    return err.unwrap_all() if is_chain_error(err) else err


def test_base_error_is_terminal():
    err = ChainError("disk full")
    assert err.unwrap() is None
    assert err.unwrap_all() is err
    assert err.message_stack() == "disk full"


def test_default_message_is_empty():
    assert ChainError().message == ""
    assert ChainError(None).message == ""
    assert str(ChainError("x")) == "x"


def test_wrap_keeps_cause_by_reference():
    cause = ValueError("bad value")
    res = wrap(cause, "while parsing")
    assert isinstance(res, Result)
    value, err = res
    assert value is None
    assert err.cause is cause
    assert err.unwrap() is cause
    assert err.message == "while parsing"


def test_static_and_instance_wrap_behave_the_same():
    cause = KeyError("k")
    node = ChainError("unrelated")
    _, via_static = ChainError.wrap(cause, "m")
    _, via_instance = node.wrap(cause, "m")
    assert via_static.cause is cause and via_instance.cause is cause
    assert via_static.message == via_instance.message == "m"
    assert node.cause is None  # instance is not involved


@pytest.mark.parametrize("depth", [0, 1, 2, 5, 20])
def test_unwrap_all_reaches_foreign_root(depth):
    root = OSError("no route to host")
    err = root
    for _ in range(depth):
        _, err = wrap(err)
    assert _root_of(err) is root


def test_message_stack_is_root_first():
    _, err = wrap(ChainError("m1"), "m2")
    _, err = wrap(err, "m3")
    _, err = wrap(err, "m4")
    assert err.message_stack() == "m1\nm2\nm3\nm4"


def test_message_stack_includes_foreign_root_and_empty_messages():
    _, err = wrap(Exception("test"))
    _, err = wrap(err)
    _, err = wrap(err)
    assert err.unwrap_all().args == ("test",)
    assert err.message_stack() == "test\n\n\n"


def test_message_stack_custom_separator():
    _, err = wrap(ValueError("inner"), "outer")
    assert err.message_stack(" <- ") == "inner <- outer"


def test_catastrophic_trace_order():
    _, inner = wrap(RuntimeError("boom"), "Something catastrophic happened")
    _, outer = wrap(inner, "Something else happened")
    stack = outer.message_stack()
    assert "Something catastrophic happened" in stack
    assert "Something else happened" in stack
    assert stack.index("Something catastrophic happened") < stack.index("Something else happened")


def test_foreign_cause_links_are_not_followed():
    deeper = ValueError("deeper")
    foreign = RuntimeError("foreign")
    foreign.__cause__ = deeper
    _, err = wrap(foreign, "ctx")
    assert err.unwrap_all() is foreign
    assert err.message_stack() == "foreign\nctx"


def test_walk_yields_outer_to_root():
    root = ValueError("root")
    _, mid = wrap(root, "mid")
    _, top = wrap(mid, "top")
    assert list(top.walk()) == [top, mid, root]


def test_node_is_read_only():
    err = ChainError("m", ValueError("x"))
    with pytest.raises(AttributeError):
        err.message = "changed"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        err.cause = None  # type: ignore[misc]


def test_cause_must_be_exception():
    with pytest.raises(TypeError):
        ChainError("m", "not an exception")  # type: ignore[arg-type]


def test_cause_mirrored_for_python_tracebacks():
    cause = ValueError("x")
    _, err = wrap(cause, "ctx")
    assert err.__cause__ is cause
    with pytest.raises(ChainError) as info:
        raise err
    assert info.value.__cause__ is cause


def test_stack_points_at_creation_site():
    _, err = wrap(ValueError("x"))
    assert err.stack[-1].name == "test_stack_points_at_creation_site"
    assert "test_stack_points_at_creation_site" in err.format_stack()
    assert "wrap(ValueError(\"x\"))" in err.format_stack()


def test_capability_check_and_message_of():
    foreign = KeyError("missing")
    _, node = wrap(foreign, "lookup")
    assert is_chain_error(node)
    assert not is_chain_error(foreign)
    assert not is_chain_error(None)
    assert message_of(node) == "lookup"
    assert message_of(ValueError("plain")) == "plain"


def test_repr():
    assert repr(ChainError("x")) == "ChainError('x')"
    assert repr(ChainError("x", ValueError("y"))) == "ChainError('x', cause=ValueError('y'))"


def test_pickle_keeps_message_and_cause():
    _, err = wrap(ValueError("inner"), "outer")
    clone = pickle.loads(pickle.dumps(err))
    assert clone.message == "outer"
    assert isinstance(clone.cause, ValueError)
    assert clone.message_stack() == "inner\nouter"


def _deep_chain(depth):
    root = ValueError("root")
    err = root
    for i in range(depth):
        _, err = wrap(err, f"level {i}")
    return root, err


def test_repr_is_flat_on_deep_chains():
    root, err = _deep_chain(3000)
    text = repr(err)
    assert text == "ChainError('level 2999', cause=ChainError('level 2998'))"
    assert err.unwrap_all() is root
    assert err.message_stack().count("\n") == 3000


def test_pickle_deep_chain_keeps_creation_stacks():
    _, err = _deep_chain(3000)
    clone = pickle.loads(pickle.dumps(err))
    assert clone.message_stack() == err.message_stack()
    assert str(clone.unwrap_all()) == "root"
    assert clone.cause.__cause__ is clone.cause.cause
    assert [f.name for f in clone.stack] == [f.name for f in err.stack]
    assert clone.stack[-1].name == "_deep_chain"


def test_message_of_unquotes_single_string_args():
    assert message_of(KeyError("missing")) == "missing"
    assert message_of(OSError(2, "No such file")) == str(OSError(2, "No such file"))
    _, err = wrap(KeyError("missing"), "lookup")
    assert err.message_stack() == "missing\nlookup"
