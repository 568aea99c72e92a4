import pytest

from jobsim.dsl import step, wf
from jobsim.plan import build_plan
from jobsim.steps import default_workflow


def _noop(ctx):
    return None


def test_default_workflow_order():
    steps = build_plan(default_workflow())
    assert [s.name for s in steps] == ["report-env", "test", "build"]
    assert steps[2].needs == ("test",)


def test_duplicate_names_rejected():
    with pytest.raises(ValueError, match="Duplicate"):
        build_plan(wf(step("a", _noop), step("a", _noop)))


def test_missing_need_rejected():
    with pytest.raises(ValueError, match="missing step 'nope'"):
        build_plan(wf(step("a", _noop, needs=["nope"])))


def test_need_declared_later_rejected():
    with pytest.raises(ValueError, match="not declared before"):
        build_plan(wf(step("build", _noop, needs=["test"]), step("test", _noop)))


def test_self_need_rejected():
    with pytest.raises(ValueError):
        build_plan(wf(step("a", _noop, needs=["a"])))


def test_step_requires_callable():
    with pytest.raises(TypeError):
        step("a", "echo hi")


def test_steps_are_hashable():
    steps = default_workflow()
    assert len({s for s in steps}) == 3
    assert step("b", _noop, needs=["a"]).needs == ("a",)
