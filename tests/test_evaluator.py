import pytest

from simplesem import (
    Number, Boolean, Add, Multiply, LessThan, Variable,
    DoNothing, Assign, If, Sequence, While,
    Environment, Evaluator, evaluate,
    UnboundVariable, TypeMismatch,
)


def test_expressions_evaluate_to_values():
    env = Environment.from_python({'x': 4})
    assert evaluate(Number(5), env) == Number(5)
    assert evaluate(Add(Variable('x'), Multiply(Number(2), Number(3))), env) == Number(10)
    assert evaluate(LessThan(Variable('x'), Number(3)), env) == Boolean(False)


def test_statements_evaluate_to_environments():
    env = Environment()
    assert evaluate(DoNothing(), env) is env
    stmt = Sequence(Assign('x', Number(2)), Assign('y', Multiply(Variable('x'), Variable('x'))))
    assert evaluate(stmt, env) == Environment.from_python({'x': 2, 'y': 4})
    assert env == Environment()


def test_if_runs_one_branch():
    stmt = If(Boolean(False), Assign('x', Variable('missing')), Assign('x', Number(2)))
    assert evaluate(stmt, Environment()) == Environment.from_python({'x': 2})


def test_while_loop():
    stmt = While(LessThan(Variable('x'), Number(3)), Assign('x', Add(Variable('x'), Number(1))))
    assert evaluate(stmt, Environment.from_python({'x': 0})) == Environment.from_python({'x': 3})


def test_long_loop_does_not_exhaust_the_stack():
    stmt = While(LessThan(Variable('i'), Number(5000)), Assign('i', Add(Variable('i'), Number(1))))
    assert evaluate(stmt, Environment.from_python({'i': 0})).lookup('i') == Number(5000)


def test_errors_propagate():
    with pytest.raises(UnboundVariable):
        evaluate(Variable('y'), Environment())
    with pytest.raises(UnboundVariable):
        evaluate(Assign('x', Add(Variable('y'), Number(1))), Environment())
    with pytest.raises(TypeMismatch):
        evaluate(Add(Boolean(True), Number(1)), Environment())
    with pytest.raises(TypeMismatch):
        evaluate(While(Number(1), DoNothing()), Environment())


def test_condition_tracing(capsys):
    evaluator = Evaluator(debug_level=3)
    evaluator.evaluate(While(Boolean(False), DoNothing()), Environment())
    out = capsys.readouterr().out.strip().split('\n')
    assert out == ['execute while (false) { do-nothing }, {}', 'while condition false']
