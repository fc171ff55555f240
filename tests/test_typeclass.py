"""Tests for capability bundles and the generic algorithms using them."""

import operator

from hypothesis import given
from kungfu import Error, Ok

from validaff import Aff, aff
from validaff import validation as V
from validaff._helpers import compose, identity
from validaff.semigroup import Log, Semigroup
from validaff.typeclass import (
    AffExn,
    AffMonad,
    Applicative,
    Apply,
    Functor,
    Monad,
    ValidationApplicative,
    lift2,
    traverse,
)
from validaff.validation import Invalid, Valid
from tests.strategies import functions, integers, list_validations


class TestProtocols:
    """Bundles expose the capabilities they claim and no more."""

    def test_validation_applicative_is_not_monad(self):
        """Validation offers map / apply / pure but no flat_map bundle."""
        F = ValidationApplicative(operator.add)
        assert isinstance(F, Functor)
        assert isinstance(F, Apply)
        assert isinstance(F, Applicative)
        assert not isinstance(F, Monad)

    def test_aff_monad(self):
        """AffMonad is a full Monad."""
        assert isinstance(AffMonad(), Monad)
        assert isinstance(AffExn, Monad)


class TestValidationApplicative:
    """Tests for the Validation bundle."""

    def test_accumulates_with_semigroup(self):
        """apply uses the bundle's combination strategy."""
        F = ValidationApplicative(Log.semigroup())
        result = F.apply(F.map(lambda a: lambda b: a + b, Invalid(Log.of("x"))), Invalid(Log.of("y")))
        assert result == Invalid(Log.of("x", "y"))

    def test_plain_function_strategy(self):
        """A plain append function works as the strategy too."""
        F = ValidationApplicative(operator.add)
        assert F.apply(Invalid("a"), Invalid("b")) == Invalid("ab")

    def test_pure(self):
        """pure builds Valid."""
        assert ValidationApplicative(operator.add).pure(1) == Valid(1)

    @given(list_validations)
    def test_map_identity(self, v):
        """F.map(id, v) == v."""
        assert ValidationApplicative(operator.add).map(identity, v) == v

    @given(list_validations, functions, functions)
    def test_map_composition(self, v, f, g):
        """F.map(g . f) == F.map(g) . F.map(f)."""
        F = ValidationApplicative(operator.add)
        assert F.map(compose(g, f), v) == F.map(g, F.map(f, v))

    @given(integers, functions)
    def test_homomorphism(self, x, f):
        """apply(pure(f), pure(x)) == pure(f(x))."""
        F = ValidationApplicative(operator.add)
        assert F.apply(F.pure(f), F.pure(x)) == F.pure(f(x))

    @given(list_validations, integers)
    def test_interchange(self, u_seed, y):
        """apply(u, pure(y)) == apply(pure(f -> f(y)), u)."""
        F = ValidationApplicative(operator.add)
        u = u_seed.map(lambda n: lambda x: x + n)
        assert F.apply(u, F.pure(y)) == F.apply(F.pure(lambda f: f(y)), u)


class TestAffMonad:
    """Tests for the Aff bundle."""

    def test_operations_delegate(self):
        """map / apply / pure / flat_map behave like the Aff methods."""
        M = AffMonad()
        chain = M.flat_map(M.apply(M.map(lambda a: lambda b: a * b, M.pure(3)), M.pure(4)), lambda n: M.pure(n + 1))
        assert aff.run_sync(chain) == Ok(13)

    def test_aff_exn_with_catching(self):
        """The exception-typed bundle composes with aff.catching."""
        parsed = lift2(AffExn, operator.add, aff.catching(lambda: int("1")), aff.catching(lambda: int("x")))
        match aff.run_sync(parsed):
            case Error(exc):
                assert isinstance(exc, ValueError)
            case Ok(_):
                raise AssertionError("expected Error")

    @given(integers, functions)
    def test_left_identity(self, x, f):
        """flat_map(pure(a), k) == k(a)."""
        M = AffMonad()
        k = lambda a: M.pure(f(a))
        assert aff.run_sync(M.flat_map(M.pure(x), k)) == aff.run_sync(k(x))

    def test_repr(self):
        """Bundle has a readable repr."""
        assert repr(AffExn) == "AffMonad()"


class TestGenericAlgorithms:
    """lift2 / traverse work for any Applicative."""

    def test_lift2_validation(self):
        """lift2 accumulates for Validation."""
        F = ValidationApplicative(operator.add)
        assert lift2(F, operator.add, Valid(1), Valid(2)) == Valid(3)
        assert lift2(F, operator.add, Invalid(["a"]), Invalid(["b"])) == Invalid(["a", "b"])

    def test_traverse_validation_collects_all(self):
        """Generic traverse over Validation reports every failure."""
        F = ValidationApplicative(Semigroup(operator.add))
        check = lambda n: V.ok(n) if n % 2 == 0 else V.error([n])
        assert traverse(F, [1, 2, 3], check) == Invalid([1, 3])
        assert traverse(F, [2, 4], check) == Valid([2, 4])

    def test_traverse_aff_short_circuits(self):
        """Generic traverse over Aff stops at the first error."""
        started = []

        def handler(n):
            started.append(n)
            return Aff.fail(n) if n == 2 else Aff.pure(n)

        assert aff.run_sync(traverse(AffMonad(), [1, 2, 3], handler)) == Error(2)

    def test_traverse_matches_specialised(self):
        """Generic and specialised traversals agree."""
        F = ValidationApplicative(operator.add)
        check = lambda n: V.ok(n) if n > 0 else V.error([n])
        items = [3, -1, 4, -5]
        assert traverse(F, items, check) == V.traverse(items, check, operator.add)

    def test_traverse_aff_reinvocation_starts_fresh(self):
        """A generic Aff traversal can be run repeatedly with the same result."""
        both = traverse(AffMonad(), [1, 2, 3], Aff.pure)
        assert aff.run_sync(both) == Ok([1, 2, 3])
        assert aff.run_sync(both) == Ok([1, 2, 3])

    def test_traverse_validation_large_input(self):
        """Generic traverse handles long inputs in order."""
        F = ValidationApplicative(operator.add)
        items = list(range(10000))
        assert traverse(F, items, V.ok) == Valid(items)
