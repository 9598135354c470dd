"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and returns raw bitstrings.

Used to seed the `quantum` random source.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .entropy import bits_to_seed, xor_bits

logger = logging.getLogger(__name__)


@dataclass
class QuantumSeedConfig:
    # Number of qubits to prepare in superposition; each gives one raw bit.
    # Keep this <= the simulator limit.
    num_qubits: int = 20

    # Independent circuit runs XOR-combined into one bitstream.
    quantum_streams: int = 2

    # SHA-256 mixing rounds applied to the combined bits.
    entropy_rounds: int = 2


DEFAULT_QUANTUM_CONFIG = QuantumSeedConfig()


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, config: QuantumSeedConfig | None = None) -> None:
        self.config = config or DEFAULT_QUANTUM_CONFIG
        self.backend = AerSimulator()

        max_qubits = getattr(self.backend, "num_qubits", None)
        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in QuantumSeedConfig."
            )

    def _build_circuit(self) -> QuantumCircuit:
        """
        Prepare N qubits, put them in superposition, then measure
        in alternating bases (Z, X, Z, X, ...).
        """
        n = self.config.num_qubits
        qc = QuantumCircuit(n, n)

        for i in range(n):
            qc.h(i)

        for i in range(n):
            if i % 2 == 1:
                # X basis: rotate back before measuring
                qc.h(i)
            qc.measure(i, i)

        return qc

    def get_raw_bits(self, seed_simulator: Optional[int] = None) -> List[int]:
        """
        Run the circuit once (single shot) and return one bit per qubit.
        """
        qc = self._build_circuit()
        tqc = transpile(qc, self.backend)

        run_options = {"shots": 1}
        if seed_simulator is not None:
            run_options["seed_simulator"] = seed_simulator
        result = self.backend.run(tqc, **run_options).result()
        counts = result.get_counts()

        # counts is a dict like {'0101...': 1}; qiskit orders bits as
        # [q_(n-1) ... q_0], reverse so index 0 is the first qubit.
        bitstring = next(iter(counts.keys()))[::-1]
        return [int(b) for b in bitstring]


def quantum_seed(config: QuantumSeedConfig | None = None) -> int:
    """
    Sample every configured stream, XOR them together and hash the result
    into an integer seed.
    """
    cfg = config or DEFAULT_QUANTUM_CONFIG
    engine = QuantumEngine(cfg)

    combined = engine.get_raw_bits()
    for _ in range(cfg.quantum_streams - 1):
        combined = xor_bits(combined, engine.get_raw_bits())

    logger.debug(
        "Quantum seed from %d qubits x %d streams, %d rounds",
        cfg.num_qubits,
        cfg.quantum_streams,
        cfg.entropy_rounds,
    )
    return bits_to_seed(combined, cfg.entropy_rounds)
