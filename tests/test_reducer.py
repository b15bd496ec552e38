import pytest

from simplesem import (
    Number, Boolean, Add, Multiply, LessThan, Variable,
    DoNothing, Assign, If, Sequence, While,
    Environment, Reducer, reduce,
    UnboundVariable, TypeMismatch, PreconditionViolation,
)


def test_add_of_literals_reduces_in_one_step():
    assert reduce(Add(Number(1), Number(2)), Environment()) == Number(3)


def test_leftmost_operand_reduces_first():
    expr = Add(Multiply(Number(2), Number(3)), Multiply(Number(4), Number(5)))
    env = Environment()
    step1 = reduce(expr, env)
    assert step1 == Add(Number(6), Multiply(Number(4), Number(5)))
    step2 = reduce(step1, env)
    assert step2 == Add(Number(6), Number(20))
    assert reduce(step2, env) == Number(26)


def test_less_than_produces_boolean():
    assert reduce(LessThan(Number(1), Number(2)), Environment()) == Boolean(True)
    assert reduce(LessThan(Number(2), Number(2)), Environment()) == Boolean(False)


def test_variable_reduces_to_binding():
    env = Environment.from_python({'x': 7})
    assert reduce(Variable('x'), env) == Number(7)
    assert reduce(Add(Variable('x'), Number(1)), env) == Add(Number(7), Number(1))


def test_assign_reduces_expression_then_binds():
    env = Environment()
    stmt, env1 = reduce(Assign('x', Add(Number(1), Number(1))), env)
    assert stmt == Assign('x', Number(2))
    assert env1 is env
    stmt, env2 = reduce(stmt, env1)
    assert stmt == DoNothing()
    assert env2 == Environment.from_python({'x': 2})
    assert env == Environment()


def test_if_reduces_condition_then_branches():
    env = Environment.from_python({'x': 1})
    stmt = If(LessThan(Variable('x'), Number(2)), Assign('y', Number(1)), Assign('y', Number(2)))
    stmt, env = reduce(stmt, env)
    assert stmt == If(LessThan(Number(1), Number(2)), Assign('y', Number(1)), Assign('y', Number(2)))
    stmt, env = reduce(stmt, env)
    assert stmt.condition == Boolean(True)
    stmt, env = reduce(stmt, env)
    assert stmt == Assign('y', Number(1))
    assert reduce(If(Boolean(False), DoNothing(), Assign('y', Number(2))), env)[0] == Assign('y', Number(2))


def test_sequence_do_nothing_law():
    env = Environment.from_python({'a': 1})
    second = Assign('b', Variable('a'))
    assert reduce(Sequence(DoNothing(), second), env) == (second, env)


def test_sequence_reduces_first_and_threads_environment():
    stmt = Sequence(Assign('x', Number(1)), Assign('y', Variable('x')))
    stmt, env = reduce(stmt, Environment())
    assert stmt == Sequence(DoNothing(), Assign('y', Variable('x')))
    assert env == Environment.from_python({'x': 1})


def test_while_unrolling_law():
    cond = LessThan(Variable('x'), Number(3))
    body = Assign('x', Add(Variable('x'), Number(1)))
    loop = While(cond, body)
    env = Environment.from_python({'x': 0})
    assert reduce(loop, env) == (If(cond, Sequence(body, While(cond, body)), DoNothing()), env)


def test_reduction_is_deterministic():
    stmt = Sequence(Assign('x', Add(Number(1), Number(2))), While(Boolean(False), DoNothing()))
    env = Environment()
    assert reduce(stmt, env) == reduce(stmt, env)


def test_reducing_terminal_nodes_is_a_precondition_violation():
    env = Environment()
    for node in (Number(1), Boolean(True), DoNothing()):
        with pytest.raises(PreconditionViolation):
            reduce(node, env)


def test_type_mismatches():
    env = Environment()
    with pytest.raises(TypeMismatch):
        reduce(Add(Boolean(True), Boolean(False)), env)
    with pytest.raises(TypeMismatch):
        reduce(Multiply(Number(2), Boolean(False)), env)
    with pytest.raises(TypeMismatch):
        reduce(LessThan(Number(1), Boolean(True)), env)
    with pytest.raises(TypeMismatch):
        reduce(If(Number(1), DoNothing(), DoNothing()), env)


def test_unbound_variable():
    with pytest.raises(UnboundVariable):
        reduce(Variable('y'), Environment())
    with pytest.raises(UnboundVariable):
        reduce(Assign('x', Variable('y')), Environment())


def test_unknown_node_type():
    with pytest.raises(NotImplementedError):
        reduce('x + 1', Environment())


def test_rule_tracing(capsys):
    reducer = Reducer(debug_level=2)
    reducer.reduce(Add(Number(1), Number(2)), Environment())
    reducer.reduce(Assign('x', Number(3)), Environment())
    out = capsys.readouterr().out.strip().split('\n')
    assert out == ['reduce Add: 1 + 2 => 3', 'reduce Assign: x = 3 => do-nothing, {x: 3}']


def test_statement_rules_are_traced(capsys):
    reducer = Reducer(debug_level=2)
    env = Environment()
    reducer.reduce(Sequence(DoNothing(), Assign('y', Number(2))), env)
    reducer.reduce(If(Boolean(True), Assign('x', Number(1)), DoNothing()), env)
    reducer.reduce(If(Boolean(False), Assign('x', Number(1)), DoNothing()), env)
    out = capsys.readouterr().out.strip().split('\n')
    assert out == [
        'reduce Sequence: do-nothing; y = 2 => y = 2',
        'reduce If: if (true) { x = 1 } else { do-nothing } => x = 1',
        'reduce If: if (false) { x = 1 } else { do-nothing } => do-nothing',
    ]


def test_condition_line_only_at_level_three(capsys):
    Reducer(debug_level=3).reduce(If(Boolean(True), DoNothing(), Assign('x', Number(1))), Environment())
    out = capsys.readouterr().out.strip().split('\n')
    assert out == [
        'if condition true -> do-nothing',
        'reduce If: if (true) { do-nothing } else { x = 1 } => do-nothing',
    ]
