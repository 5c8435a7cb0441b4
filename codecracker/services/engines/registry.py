import logging
import threading

from codecracker.models.schemas import CipherFamily, CipherType
from codecracker.services.engines.base import Solver

logger = logging.getLogger(__name__)


class SolverRegistry:
    """
    Registry for cipher solvers.

    Maps each cipher type to exactly one solver instance; registering a solver
    for a type that already has one replaces it. Instances are independent, so
    tests and embedders can build isolated registries. Writes are serialised
    by a lock and readers work on snapshots, so solvers may be registered
    while cracking is in progress.
    """

    def __init__(self, solvers: list[Solver] | None = None):
        self._solvers: dict[CipherType, Solver] = {}
        self._lock = threading.Lock()
        for solver in solvers or []:
            self.register(solver)

    def register(self, solver: Solver) -> Solver:
        """
        Register a solver instance, replacing any previous one for its type.

        Args:
            solver: The solver to register

        Returns:
            The solver (for chaining)
        """
        with self._lock:
            previous = self._solvers.get(solver.cipher_type)
            self._solvers[solver.cipher_type] = solver

        if previous is not None and previous is not solver:
            logger.debug("Replaced %r with %r", previous, solver)
        else:
            logger.debug("Registered %r", solver)
        return solver

    def get_solver(self, cipher_type: CipherType) -> Solver | None:
        """
        Get the solver for the specified cipher type.

        Args:
            cipher_type: The type of cipher

        Returns:
            Solver instance or None if not registered
        """
        return self._solvers.get(cipher_type)

    def get_solvers_by_family(self, family: CipherFamily) -> list[Solver]:
        """
        Get all solvers belonging to a cipher family.

        Args:
            family: The cipher family

        Returns:
            List of solver instances
        """
        return [s for s in self.get_all_solvers() if s.cipher_family == family]

    def get_all_solvers(self) -> list[Solver]:
        """Get all registered solvers in registration order."""
        with self._lock:
            return list(self._solvers.values())

    def get_encryptable_cipher_types(self) -> list[CipherType]:
        """Cipher types whose solver supports encryption."""
        return [s.cipher_type for s in self.get_all_solvers() if s.can_encrypt]

    def list_registered(self) -> list[CipherType]:
        """List all registered cipher types."""
        with self._lock:
            return list(self._solvers)

    def is_registered(self, cipher_type: CipherType) -> bool:
        """Check if a cipher type is registered."""
        return cipher_type in self._solvers

    def __len__(self) -> int:
        return len(self._solvers)
