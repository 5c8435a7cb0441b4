"""
Comprehensive tests for the classical cipher solvers.
"""
import pytest

from codecracker.core.exceptions import EncryptionNotSupportedError, InvalidKeyError
from codecracker.models.schemas import CipherFamily, CipherType, SolverOptions
from codecracker.services.engines import BUILTIN_SOLVERS, create_default_registry
from codecracker.services.engines.monoalphabetic import (
    AtbashSolver,
    CaesarSolver,
    ROT13Solver,
    SubstitutionSolver,
)
from codecracker.services.engines.modern import HashLookupSolver
from codecracker.services.engines.polyalphabetic import VigenereSolver
from codecracker.services.engines.polygraphic import PlayfairSolver
from codecracker.services.engines.registry import SolverRegistry
from codecracker.services.engines.transposition import ColumnarSolver, RailFenceSolver
from codecracker.services.engines.transposition.columnar import (
    columnar_decrypt,
    columnar_encrypt,
    keyword_to_permutation,
)
from codecracker.services.engines.transposition.rail_fence import zigzag

PASSAGE = (
    "cryptography is the study of secure communication in the presence of adversaries "
    "long before computers existed people invented ciphers to hide the meaning of their "
    "messages from unauthorized readers some methods relied on simple substitution while "
    "others used transposition or periodic keys the security of these systems depended on "
    "keeping the method and the key secret from the enemy during the war analysts learned "
    "to break many of these ciphers by counting how often each letter appeared in the "
    "intercepted messages and comparing those counts with the known frequencies of the language"
)


class TestSolverRegistry:
    """Test the solver registry."""

    @pytest.fixture
    def registry(self):
        return create_default_registry()

    def test_all_ciphers_registered(self, registry):
        """Every cipher type has a built-in solver."""
        assert set(registry.list_registered()) == set(CipherType)
        assert len(registry) == len(CipherType) == len(BUILTIN_SOLVERS)

    def test_get_solvers_by_family(self, registry):
        encodings = {s.cipher_type for s in registry.get_solvers_by_family(CipherFamily.ENCODING)}
        assert encodings == {
            CipherType.BASE64,
            CipherType.BASE32,
            CipherType.HEX,
            CipherType.BINARY,
            CipherType.URL_ENCODING,
            CipherType.MORSE,
        }
        for solver in registry.get_solvers_by_family(CipherFamily.MONOALPHABETIC):
            assert solver.cipher_family == CipherFamily.MONOALPHABETIC

    def test_encryptable_types(self, registry):
        encryptable = set(registry.get_encryptable_cipher_types())
        assert encryptable == set(CipherType) - {CipherType.HASH_LOOKUP}

    def test_register_replaces(self, registry):
        replacement = CaesarSolver()
        registry.register(replacement)
        assert registry.get_solver(CipherType.CAESAR) is replacement
        assert len(registry) == len(CipherType)

    def test_empty_registry(self):
        registry = SolverRegistry()
        assert len(registry) == 0
        assert not registry.is_registered(CipherType.CAESAR)
        assert registry.get_solver(CipherType.CAESAR) is None
        assert registry.get_all_solvers() == []

    def test_registries_are_isolated(self):
        first = SolverRegistry([CaesarSolver()])
        second = SolverRegistry()
        second.register(ROT13Solver())
        assert first.list_registered() == [CipherType.CAESAR]
        assert second.list_registered() == [CipherType.ROT13]

    def test_hash_lookup_cannot_encrypt(self):
        with pytest.raises(EncryptionNotSupportedError):
            HashLookupSolver().encrypt("password")


class TestMonoalphabeticCiphers:
    """Test monoalphabetic substitution ciphers."""

    def test_rot13_known(self):
        results = ROT13Solver().solve("Uryyb Jbeyq")
        assert len(results) == 1
        assert results[0].plaintext == "Hello World"
        assert results[0].key == 13

    def test_rot13_is_involution(self):
        solver = ROT13Solver()
        for text in ["Hello, World!", "abcxyz ABCXYZ", PASSAGE]:
            assert solver.transform(solver.transform(text)) == text
        assert solver.encrypt("Hello").ciphertext == "Uryyb"

    def test_atbash_known(self):
        solver = AtbashSolver()
        assert solver.encrypt("Hello").ciphertext == "Svool"
        assert solver.solve("Svool")[0].plaintext == "Hello"

    def test_atbash_is_involution(self):
        solver = AtbashSolver()
        for text in ["Hello, World!", "abcxyz ABCXYZ", PASSAGE]:
            assert solver.transform(solver.transform(text)) == text

    def test_substitution_with_key(self):
        solver = SubstitutionSolver()
        key = "qwertyuiopasdfghjklzxcvbnm"
        ciphertext = solver.encrypt("Hello World", SolverOptions(key=key)).ciphertext
        assert ciphertext == "Itssg Vgksr"

        result = solver.solve(ciphertext, SolverOptions(key=key))[0]
        assert result.plaintext == "Hello World"
        assert result.details["method"] == "substitution"

    def test_substitution_frequency_analysis(self):
        solver = SubstitutionSolver()
        results = solver.solve("Itssg Vgksr")
        assert len(results) == 1
        assert results[0].details["method"] == "frequency-analysis"
        assert sorted(results[0].key) == list("abcdefghijklmnopqrstuvwxyz")

    def test_substitution_encrypt_requires_key(self):
        with pytest.raises(InvalidKeyError):
            SubstitutionSolver().encrypt("Hello", SolverOptions(key="short"))


class TestPolyalphabeticCiphers:
    """Test polyalphabetic ciphers."""

    @pytest.fixture
    def solver(self):
        return VigenereSolver()

    def test_vigenere_known(self, solver):
        ciphertext = solver.encrypt("ATTACKATDAWN", SolverOptions(key="LEMON")).ciphertext
        assert ciphertext == "LXFOPVEFRNHR"

        result = solver.solve(ciphertext, SolverOptions(key="LEMON"))[0]
        assert result.plaintext == "ATTACKATDAWN"
        assert result.key == "lemon"

    def test_vigenere_skips_non_letters(self, solver):
        ciphertext = solver.encrypt("at tack!", SolverOptions(key="lemon")).ciphertext
        assert ciphertext == "lx fopv!"

    def test_vigenere_crack(self, solver):
        ciphertext = solver.encrypt(PASSAGE, SolverOptions(key="key")).ciphertext
        best = solver.solve(ciphertext)[0]
        assert best.plaintext == PASSAGE
        assert best.details["key_length"] % 3 == 0

    def test_vigenere_too_short(self, solver):
        assert solver.solve("Short") == []

    def test_vigenere_key_without_letters(self, solver):
        assert solver.solve("LXFOPVEFRNHR", SolverOptions(key="123")) == []
        with pytest.raises(InvalidKeyError):
            solver.encrypt("hello", SolverOptions(key="123"))


class TestTranspositionCiphers:
    """Test transposition ciphers."""

    def test_zigzag(self):
        assert zigzag(7, 3) == [0, 1, 2, 1, 0, 1, 2]

    def test_rail_fence_known(self):
        solver = RailFenceSolver()
        plaintext = "WEAREDISCOVEREDFLEEATONCE"
        ciphertext = solver.encrypt(plaintext, SolverOptions(key="3")).ciphertext
        assert ciphertext == "WECRLTEERDSOEEFEAOCAIVDEN"

        result = solver.solve(ciphertext, SolverOptions(key="3"))[0]
        assert result.plaintext == plaintext
        assert result.key == 3

    def test_rail_fence_brute_force(self):
        solver = RailFenceSolver()
        plaintext = "we are discovered flee at once"
        ciphertext = solver.encrypt(plaintext).ciphertext
        results = solver.solve(ciphertext, SolverOptions(max_results=10))
        assert any(r.plaintext == plaintext and r.key == 3 for r in results)

    def test_rail_fence_roundtrip(self):
        solver = RailFenceSolver()
        for rails in range(2, 8):
            ciphertext = solver.encrypt(PASSAGE, SolverOptions(key=str(rails))).ciphertext
            result = solver.solve(ciphertext, SolverOptions(key=str(rails)))[0]
            assert result.plaintext == PASSAGE

    def test_rail_fence_invalid_key(self):
        solver = RailFenceSolver()
        assert solver.solve("WECRLTEERD", SolverOptions(key="one")) == []
        assert solver.solve("WECRLTEERD", SolverOptions(key="1")) == []
        with pytest.raises(InvalidKeyError):
            solver.encrypt("HELLO", SolverOptions(key="1"))

    def test_keyword_to_permutation(self):
        assert keyword_to_permutation("ZEBRAS") == [4, 2, 1, 3, 5, 0]
        assert keyword_to_permutation("secret") == [2, 1, 4, 3, 0, 5]

    def test_columnar_known(self):
        solver = ColumnarSolver()
        plaintext = "WEAREDISCOVEREDFLEEATONCE"
        ciphertext = solver.encrypt(plaintext, SolverOptions(key="ZEBRAS")).ciphertext
        assert ciphertext == "EVLNACDTESEAROFODEECWIREE"

        result = solver.solve(ciphertext, SolverOptions(key="ZEBRAS"))[0]
        assert result.plaintext == plaintext

    def test_columnar_roundtrip(self):
        for keyword in ["ab", "key", "zebras", "columnar", "transposed"]:
            permutation = keyword_to_permutation(keyword)
            for text in [PASSAGE, PASSAGE[:len(keyword) * 7], "short"]:
                assert columnar_decrypt(columnar_encrypt(text, permutation), permutation) == text

    def test_columnar_brute_force(self):
        solver = ColumnarSolver()
        plaintext = "the quick brown fox jumps over the lazy dog"
        ciphertext = solver.encrypt(plaintext, SolverOptions(key="cab")).ciphertext
        best = solver.solve(ciphertext)[0]
        assert best.plaintext == plaintext

    def test_columnar_encrypt_requires_key(self):
        with pytest.raises(InvalidKeyError):
            ColumnarSolver().encrypt("HELLO")


class TestPolygraphicCiphers:
    """Test polygraphic ciphers."""

    @pytest.fixture
    def solver(self):
        return PlayfairSolver()

    def test_grid(self, solver):
        grid = solver.build_grid("playfair example")
        flat = "".join("".join(row) for row in grid)
        assert flat == "PLAYFIREXMBCDGHKNOQSTUVWZ"

    def test_playfair_known(self, solver):
        options = SolverOptions(key="playfair example")
        ciphertext = solver.encrypt("Hide the gold in the tree stump", options).ciphertext
        assert ciphertext == "BMODZBXDNABEKUDMUIXMMOUVIF"

        result = solver.solve(ciphertext, options)[0]
        assert result.plaintext == "hidethegoldinthetrexestump"

    def test_playfair_double_letters(self, solver):
        ciphertext = solver.encrypt("BALLOON", SolverOptions(key="monarchy")).ciphertext
        assert len(ciphertext) == 8
        result = solver.solve(ciphertext, SolverOptions(key="monarchy"))[0]
        assert result.plaintext == "balxloon"

    def test_playfair_requires_key(self, solver):
        assert solver.solve("BMODZBXDNABEKUDMUIXMMOUVIF") == []
        with pytest.raises(InvalidKeyError):
            solver.encrypt("hello")
