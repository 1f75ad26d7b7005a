import pytest

from mal import errors
from mal.evaluation.evaluator import evaluate
from mal.types import Closure, Environment, Nil, Symbol, NativeFunction

# -----------------------------------------------------
# Fixtures
# -----------------------------------------------------

@pytest.fixture
def bare_env():
    """Environment with a couple of hand-rolled natives, no builtins module."""
    env = Environment()
    env.define(Symbol("+"), NativeFunction("+", lambda _, args: sum(args)))
    env.define(Symbol("x"), 42.0)
    return env

# -----------------------------------------------------
# Raw AST evaluation
# -----------------------------------------------------

def test_self_evaluating_atoms(bare_env):
    assert evaluate(1.0, bare_env) == 1.0
    assert evaluate("hello", bare_env) == "hello"
    assert evaluate(True, bare_env) is True
    assert evaluate(Nil, bare_env) is Nil


def test_empty_list_evaluates_to_itself(bare_env):
    assert evaluate([], bare_env) == []


def test_symbol_lookup(bare_env):
    assert evaluate(Symbol("x"), bare_env) == 42.0
    with pytest.raises(errors.MalUnboundSymbol):
        evaluate(Symbol("z"), bare_env)


def test_native_application(bare_env):
    assert evaluate([Symbol("+"), 1.0, 2.0, Symbol("x")], bare_env) == 45.0


def test_closure_values_self_evaluate(bare_env):
    fn = Closure([Symbol("a")], Symbol("a"), bare_env)
    assert evaluate(fn, bare_env) is fn
    assert evaluate([fn, 7.0], bare_env) == 7.0

# -----------------------------------------------------
# Special forms through source text
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(def! x 10)", 10.0),
        ("(let* (a 1 b (+ a 1)) (+ a b))", 3.0),
        ("(let* (a 1) (let* (a 2) a))", 2.0),
        ("(let* () 5)", 5.0),
        ("(do 1 2 3)", 3.0),
        ("(do (def! y 4) (* y y))", 16.0),
        ("(if 0 1 2)", 1.0),
        ("(if nil 1 2)", 2.0),
        ("(if false 1 2)", 2.0),
        ("(if true 1 2)", 1.0),
        ('(if "" 1 2)', 1.0),
        ("(if (list) 1 2)", 1.0),
        ("((fn* (a b) (+ a b)) 2 3)", 5.0),
        ("((fn* () 7))", 7.0),
        ("(((fn* (x) (fn* (y) (+ x y))) 3) 4)", 7.0),
        ("()", []),
        ("(list 1 2)", [1.0, 2.0]),
    ],
)
def test_forms(interp, source, expected):
    assert interp.eval(source) == expected


@pytest.mark.parametrize("source", ["(if false 1)", "(if nil 1)", "(do)"])
def test_forms_returning_nil(interp, source):
    assert interp.eval(source) is Nil


def test_fn_does_not_evaluate_body(interp):
    fn = interp.eval("(fn* (a) (undefined-function a))")
    assert isinstance(fn, Closure)
    assert fn.params == [Symbol("a")]
    with pytest.raises(errors.MalUnboundSymbol):
        interp.eval("((fn* (a) (undefined-function a)) 1)")


def test_if_only_evaluates_taken_branch(interp):
    assert interp.eval("(if true 1 (undefined-function))") == 1.0
    assert interp.eval("(if false (undefined-function) 2)") == 2.0


def test_let_bindings_are_local(interp):
    assert interp.eval("(let* (tmp 1) tmp)") == 1.0
    with pytest.raises(errors.MalUnboundSymbol):
        interp.eval("tmp")


def test_def_inside_closure_mutates_innermost_frame(interp):
    interp.eval("(def! x 1)")
    interp.eval("(def! set-x (fn* () (def! x 2)))")
    assert interp.eval("(set-x)") == 2.0
    assert interp.eval("x") == 1.0


def test_def_inside_let_stays_in_let_scope(interp):
    assert interp.eval("(let* (a 1) (do (def! b 2) (+ a b)))") == 3.0
    with pytest.raises(errors.MalUnboundSymbol):
        interp.eval("b")


def test_closures_see_later_top_level_definitions(interp):
    interp.eval("(def! get-y (fn* () y))")
    interp.eval("(def! y 5)")
    assert interp.eval("(get-y)") == 5.0
    interp.eval("(def! y 6)")
    assert interp.eval("(get-y)") == 6.0


def test_closure_captures_defining_scope(interp):
    interp.eval("(def! make-counter (fn* (start) (fn* (step) (+ start step))))")
    interp.eval("(def! from-ten (make-counter 10))")
    interp.eval("(def! from-hundred (make-counter 100))")
    assert interp.eval("(from-ten 1)") == 11.0
    assert interp.eval("(from-hundred 1)") == 101.0


def test_parameters_shadow_globals(interp):
    interp.eval("(def! a 1)")
    assert interp.eval("((fn* (a) (* a 10)) 5)") == 50.0
    assert interp.eval("a") == 1.0


def test_operator_position_is_evaluated(interp):
    assert interp.eval("((if true + *) 2 3)") == 5.0
    assert interp.eval("((if false + *) 2 3)") == 6.0


def test_recursive_function(interp):
    interp.eval("(def! fib (fn* (n) (if (< n 2) n (+ (fib (- n 1)) (fib (- n 2))))))")
    assert interp.eval("(fib 15)") == 610.0

# -----------------------------------------------------
# Errors
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,error",
    [
        ("undefined-symbol", errors.MalUnboundSymbol),
        ("(1 2)", errors.MalNotCallable),
        ('("f" 2)', errors.MalNotCallable),
        ("(nil)", errors.MalNotCallable),
        ("((fn* (a b) a) 1)", errors.MalArityError),
        ("((fn* (a) a) 1 2)", errors.MalArityError),
        ("(def! x)", errors.MalArityError),
        ("(def! 1 2)", errors.MalTypeError),
        ("(let* (a) a)", errors.MalSyntaxError),
        ("(let* (1 2) 3)", errors.MalSyntaxError),
        ("(let* a 1)", errors.MalSyntaxError),
        ("(let* (a 1))", errors.MalArityError),
        ("(if true)", errors.MalArityError),
        ("(if true 1 2 3)", errors.MalArityError),
        ("(fn* (a))", errors.MalArityError),
        ("(fn* (1) 1)", errors.MalSyntaxError),
        ("(fn* a a)", errors.MalSyntaxError),
    ],
)
def test_errors(interp, source, error):
    with pytest.raises(error):
        interp.eval(source)


def test_error_aborts_without_partial_definition(interp):
    with pytest.raises(errors.MalUnboundSymbol):
        interp.eval("(def! z (+ 1 missing))")
    with pytest.raises(errors.MalUnboundSymbol):
        interp.eval("z")


def test_all_errors_share_a_base_class():
    for cls in (
        errors.MalSyntaxError,
        errors.MalUnboundSymbol,
        errors.MalNotCallable,
        errors.MalIOError,
        errors.MalTypeError,
        errors.MalArityError,
    ):
        assert issubclass(cls, errors.MalError)


# -----------------------------------------------------
# Deep non-tail recursion
# -----------------------------------------------------

def test_deep_non_tail_recursion(interp):
    interp.eval("(def! sum (fn* (n) (if (= n 0) 0 (+ n (sum (- n 1))))))")
    assert interp.eval("(sum 500)") == 125250.0
    assert interp.eval("(sum 900)") == 405450.0


def test_runaway_recursion_raises_mal_error(interp):
    interp.eval("(def! sum (fn* (n) (if (= n 0) 0 (+ n (sum (- n 1))))))")
    with pytest.raises(errors.MalRecursionError):
        interp.eval("(sum 1000000)")
    # The interpreter is still usable afterwards
    assert interp.eval("(sum 10)") == 55.0
