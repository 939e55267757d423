"""Tests for the expression compiler and complex evaluator."""
import cmath
import math

import numpy as np
import pytest


def ev(text, binding, variable="z"):
    from complexplane.expression import parse, compile_expression, evaluate
    return evaluate(compile_expression(parse(text), variable), binding)


def is_invalid(value):
    return cmath.isnan(value.real) and cmath.isnan(value.imag)


# ---------------------------------------------------------------------------
# Identities
# ---------------------------------------------------------------------------

class TestIdentities:

    def test_z_squared_at_i(self):
        result = ev("z^2", 1j)
        assert abs(result - (-1 + 0j)) < 1e-9

    def test_euler_identity(self):
        for binding in (0, 3.5, 1 - 2j):
            result = ev("exp(i*pi)", binding, variable="t")
            assert abs(result - (-1 + 0j)) < 1e-6

    def test_constant_expression_ignores_binding(self):
        from complexplane.expression import parse, compile_expression
        compiled = compile_expression(parse("sin(pi / 4) * e + i^2"), "z")
        values = {compiled.evaluate(b) for b in (0, 1, -3 + 4j, 1e6j)}
        assert len(values) == 1

    def test_reserved_constants(self):
        assert ev("i", 0) == 1j
        assert ev("pi", 0) == complex(math.pi, 0)
        assert ev("e", 0) == complex(math.e, 0)

    def test_result_is_builtin_complex(self):
        assert type(ev("z + 1", 2)) is complex


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------

class TestArithmetic:

    def test_add_subtract(self):
        assert ev("z + (1 + 2*i)", 3 - 1j) == pytest.approx(4 + 1j)
        assert ev("z - (1 + 2*i)", 3 - 1j) == pytest.approx(2 - 3j)

    def test_multiplication(self):
        assert ev("(1 + 2*i) * (3 - i)", 0) == pytest.approx(5 + 5j)

    def test_division(self):
        assert ev("1 / z", 2j) == pytest.approx(-0.5j)

    def test_unary_minus(self):
        assert ev("-z", 2 - 3j) == pytest.approx(-2 + 3j)

    def test_precedence_of_minus_and_power(self):
        assert ev("-z^2", 2) == pytest.approx(-4)
        assert ev("2^-1", 0) == pytest.approx(0.5)

    def test_right_associative_power(self):
        assert ev("2^3^2", 0) == pytest.approx(512)


# ---------------------------------------------------------------------------
# Powers
# ---------------------------------------------------------------------------

class TestPower:

    def test_zero_to_the_zero_is_one(self):
        assert ev("z^0", 0) == 1 + 0j

    def test_zero_to_positive_is_zero(self):
        assert ev("z^2", 0) == 0j
        assert ev("z^(1 + i)", 0) == 0j

    def test_zero_to_negative_is_zero(self):
        assert ev("z^-1", 0) == 0j

    def test_fractional_power_principal_branch(self):
        assert ev("z^0.5", -1) == pytest.approx(1j, abs=1e-12)

    def test_complex_exponent(self):
        assert ev("i^i", 0) == pytest.approx(math.exp(-math.pi / 2), abs=1e-12)

    def test_pow_function(self):
        assert ev("pow(z, 3)", 2) == pytest.approx(8)


# ---------------------------------------------------------------------------
# Elementary functions
# ---------------------------------------------------------------------------

class TestFunctions:

    def test_trigonometric(self):
        assert ev("sin(z)", 1j) == pytest.approx(1j * math.sinh(1))
        assert ev("cos(z)", 1j) == pytest.approx(math.cosh(1))
        assert ev("tan(z)", 0.3) == pytest.approx(math.tan(0.3))

    def test_hyperbolic_and_inverse(self):
        assert ev("sinh(z)", 0.5) == pytest.approx(math.sinh(0.5))
        assert ev("tanh(z)", 0.5) == pytest.approx(math.tanh(0.5))
        assert ev("asin(sin(z))", 0.4) == pytest.approx(0.4)
        assert ev("atan(z)", 1) == pytest.approx(math.pi / 4)

    def test_exp_log_inverse(self):
        assert ev("log(exp(z))", 0.5 + 1j) == pytest.approx(0.5 + 1j)
        assert ev("ln(z)", math.e) == pytest.approx(1)

    def test_log_principal_branch(self):
        assert ev("log(z)", -1) == pytest.approx(1j * math.pi)

    def test_log_with_base(self):
        assert ev("log(z, 2)", 8) == pytest.approx(3)

    def test_sqrt_principal_branch(self):
        assert ev("sqrt(z)", -4) == pytest.approx(2j)
        assert ev("sqrt(-4)", 0) == pytest.approx(2j)

    def test_negative_zero_imaginary_part_stays_on_upper_side(self):
        assert ev("sqrt(z)", complex(-4, -0.0)) == pytest.approx(2j)
        assert ev("arg(z)", complex(-1, -0.0)) == pytest.approx(math.pi)

    def test_abs_arg_re_im_conj(self):
        assert ev("abs(z)", 3 + 4j) == pytest.approx(5)
        assert ev("arg(z)", 1j) == pytest.approx(math.pi / 2)
        assert ev("re(z)", 3 + 4j) == pytest.approx(3)
        assert ev("im(z)", 3 + 4j) == pytest.approx(4)
        assert ev("conj(z)", 3 + 4j) == pytest.approx(3 - 4j)


# ---------------------------------------------------------------------------
# Non-finite sentinels
# ---------------------------------------------------------------------------

class TestSentinels:

    def test_division_by_zero_is_invalid(self):
        assert is_invalid(ev("1 / z", 0))
        assert is_invalid(ev("0 / z", 0))

    def test_log_of_zero_is_invalid(self):
        assert is_invalid(ev("log(z)", 0))
        assert is_invalid(ev("ln(z)", 0))

    def test_sentinel_propagates(self):
        result = ev("1 / z + 5 * i", 0)
        assert not cmath.isfinite(result)

    def test_overflow_does_not_raise(self):
        assert not cmath.isfinite(ev("exp(z)", 1000))

    def test_zero_base_with_invalid_exponent_is_invalid(self):
        assert not cmath.isfinite(ev("0^(1/z)", 0))
        assert not cmath.isfinite(ev("z^(1/(z - z))", 0))
        assert not cmath.isfinite(ev("pow(0, log(z))", 0))

    def test_invalid_base_with_zero_exponent_is_invalid(self):
        assert not cmath.isfinite(ev("(1/z)^0", 0))

    @pytest.mark.parametrize("template", [
        "{bad} + z", "z + {bad}",
        "{bad} - z", "z - {bad}",
        "{bad} * z", "z * {bad}",
        "{bad} / z", "z / {bad}",
        "{bad} ^ z", "z ^ {bad}",
        "pow({bad}, z)", "pow(z, {bad})",
        "log({bad}, 2)", "log(2, {bad})",
        "-{bad}",
    ])
    @pytest.mark.parametrize("binding", [0, 2 - 1j])
    def test_invalid_operand_propagates_through_operators(self, template, binding):
        result = ev(template.format(bad="(1/(z - z))"), binding)
        assert not cmath.isfinite(result)

    @pytest.mark.parametrize("name", [
        "sin", "cos", "tan", "sinh", "cosh", "tanh", "asin", "acos", "atan",
        "exp", "log", "ln", "sqrt", "abs", "arg", "re", "im", "conj",
    ])
    def test_invalid_operand_propagates_through_functions(self, name):
        result = ev(f"{name}(1/(z - z))", 0)
        assert not cmath.isfinite(result)

    def test_no_warnings_emitted(self):
        import warnings
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            ev("1 / z + log(z) + z^-1", 0)


# ---------------------------------------------------------------------------
# Evaluation errors
# ---------------------------------------------------------------------------

class TestEvaluationErrors:

    def test_unknown_function(self):
        from complexplane.expression import EvaluationError
        with pytest.raises(EvaluationError, match="Unknown function"):
            ev("foo(z)", 1)

    @pytest.mark.parametrize("text", ["sin(z, 1)", "pow(z)", "log()", "exp(z, z, z)"])
    def test_wrong_arity(self, text):
        from complexplane.expression import EvaluationError
        with pytest.raises(EvaluationError, match="argument"):
            ev(text, 1)

    def test_undefined_symbol(self):
        from complexplane.expression import EvaluationError
        with pytest.raises(EvaluationError, match="Undefined symbol"):
            ev("t + 1", 1, variable="z")

    def test_compile_does_not_evaluate(self):
        from complexplane.expression import parse, compile_expression
        # Unknown names only fail once evaluated
        compiled = compile_expression(parse("foo(z)"), "z")
        assert compiled.variable == "z"


# ---------------------------------------------------------------------------
# Compiled expression handle
# ---------------------------------------------------------------------------

class TestCompiledExpression:

    def test_array_evaluation_matches_scalar(self):
        from complexplane.expression import parse, compile_expression
        compiled = compile_expression(parse("sin(z) / z + sqrt(z)"), "z")
        points = np.array([[1 + 1j, -2], [0.5j, -3 - 0.1j]])
        values = compiled.evaluate_array(points)
        assert values.shape == (2, 2)
        for p, v in zip(points.ravel(), values.ravel()):
            assert v == pytest.approx(compiled.evaluate(p))

    def test_constant_expression_broadcasts(self):
        from complexplane.expression import parse, compile_expression
        compiled = compile_expression(parse("1"), "z")
        values = compiled.evaluate_array(np.zeros((3, 4)))
        assert values.shape == (3, 4)
        assert np.all(values == 1)

    def test_array_sentinel_is_per_element(self):
        from complexplane.expression import parse, compile_expression
        compiled = compile_expression(parse("1 / z"), "z")
        values = compiled.evaluate_array(np.array([1, 0, 2]))
        assert values[0] == 1 and values[2] == 0.5
        assert np.isnan(values[1].real) and np.isnan(values[1].imag)

    def test_is_immutable(self):
        import dataclasses
        from complexplane.expression import parse, compile_expression
        compiled = compile_expression(parse("z"), "z")
        with pytest.raises(dataclasses.FrozenInstanceError):
            compiled.variable = "t"

    def test_reuse_gives_identical_results(self):
        from complexplane.expression import parse, compile_expression
        compiled = compile_expression(parse("exp(z) * z^2"), "z")
        first = [compiled.evaluate(b) for b in (1j, 2, -1 + 0.5j)]
        second = [compiled.evaluate(b) for b in (1j, 2, -1 + 0.5j)]
        assert first == second


# ---------------------------------------------------------------------------
# Lenient helpers
# ---------------------------------------------------------------------------

class TestLenientHelpers:

    def test_parse_and_compile(self):
        from complexplane.expression import parse_and_compile
        assert parse_and_compile("", "z") is None
        assert parse_and_compile("z +", "z") is None
        assert parse_and_compile("z + 1", "z").variable == "z"

    def test_evaluate_at(self):
        from complexplane.expression import parse_and_compile, evaluate_at
        assert evaluate_at(parse_and_compile("z * 2", "z"), 1j) == 2j
        assert evaluate_at(parse_and_compile("foo(z)", "z"), 1j) is None

    def test_evaluate_expression_at(self):
        from complexplane.expression import evaluate_expression_at
        assert evaluate_expression_at("z + 1", "z", 1j) == 1 + 1j
        assert evaluate_expression_at("z +", "z", 1j) is None

    def test_evaluate_at_t(self):
        from complexplane.expression import evaluate_at_t
        assert evaluate_at_t("exp(i * t)", math.pi) == pytest.approx(-1, abs=1e-12)
