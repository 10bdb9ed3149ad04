"""
Artifact Registry
Resolves compiled Hardhat artifacts into deployable contract templates
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from loguru import logger

from .exceptions import AmbiguousTemplateError, TemplateNotFoundError


@dataclass(frozen=True)
class ContractTemplate:
    """Precompiled contract definition"""

    name: str
    source_name: str
    abi: List[Dict]
    bytecode: str
    path: Path

    @property
    def qualified_name(self) -> str:
        return f"{self.source_name}:{self.name}"


class ArtifactRegistry:
    """
    Looks up contract templates under a Hardhat artifacts directory

    Layout: <artifacts_dir>/<source path>/<ContractName>.json
    e.g. artifacts/contracts/VotingSystem.sol/VotingSystem.json
    """

    def __init__(self, artifacts_dir: str = "artifacts"):
        """
        Initialize Artifact Registry

        Args:
            artifacts_dir: Hardhat artifacts directory
        """
        self.artifacts_dir = Path(artifacts_dir)
        self._cache: Dict[str, ContractTemplate] = {}

    def resolve(self, name: str) -> ContractTemplate:
        """
        Resolve a template by bare or fully qualified name

        Args:
            name: 'VotingSystem' or 'contracts/VotingSystem.sol:VotingSystem'

        Returns:
            ContractTemplate

        Raises:
            TemplateNotFoundError: no usable artifact for this name
        """
        if name in self._cache:
            return self._cache[name]

        if not self.artifacts_dir.is_dir():
            raise TemplateNotFoundError(
                f"Artifacts directory not found: {self.artifacts_dir} "
                f"(run 'npx hardhat compile' first)"
            )

        if ':' in name:
            source_name, contract_name = name.rsplit(':', 1)
            path = self.artifacts_dir / source_name / f"{contract_name}.json"
            if not path.is_file():
                raise TemplateNotFoundError(f"Artifact for {name} not found")
        else:
            matches = self._find_artifacts(name)

            if not matches:
                raise TemplateNotFoundError(
                    f"Artifact for contract \"{name}\" not found in {self.artifacts_dir}"
                )

            if len(matches) > 1:
                candidates = ', '.join(sorted(self._qualified_name(p) for p in matches))
                raise AmbiguousTemplateError(
                    f"Multiple artifacts for contract \"{name}\", use a fully "
                    f"qualified name: {candidates}"
                )

            path = matches[0]

        template = self._load(path)
        self._cache[name] = template

        logger.debug(f"Resolved {name} -> {path}")
        return template

    def list_templates(self) -> List[str]:
        """Fully qualified names of all artifacts"""
        if not self.artifacts_dir.is_dir():
            return []

        return sorted(
            self._qualified_name(path)
            for path in self.artifacts_dir.rglob("*.json")
            if self._is_contract_artifact(path)
        )

    def _find_artifacts(self, contract_name: str) -> List[Path]:
        return [
            path
            for path in self.artifacts_dir.rglob(f"{contract_name}.json")
            if self._is_contract_artifact(path)
        ]

    def _is_contract_artifact(self, path: Path) -> bool:
        relative = path.relative_to(self.artifacts_dir)
        return (
            'build-info' not in relative.parts
            and not path.name.endswith('.dbg.json')
            and len(relative.parts) > 1
        )

    def _qualified_name(self, path: Path) -> str:
        relative = path.relative_to(self.artifacts_dir)
        return f"{relative.parent.as_posix()}:{path.stem}"

    def _load(self, path: Path) -> ContractTemplate:
        """Read and validate an artifact file"""
        try:
            with open(path, 'r') as f:
                artifact = json.load(f)

            abi = artifact['abi']
            bytecode = artifact['bytecode']
        except (OSError, ValueError, KeyError, TypeError) as e:
            raise TemplateNotFoundError(f"Malformed artifact {path}: {e}") from e

        contract_name = artifact.get('contractName', path.stem)

        if not bytecode or bytecode == '0x':
            raise TemplateNotFoundError(
                f"{contract_name} is abstract or an interface and can't be deployed"
            )

        source_name = artifact.get(
            'sourceName',
            path.relative_to(self.artifacts_dir).parent.as_posix()
        )

        return ContractTemplate(
            name=contract_name,
            source_name=source_name,
            abi=abi,
            bytecode=bytecode,
            path=path
        )
