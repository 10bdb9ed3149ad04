"""
Unit Tests for Artifact Registry
"""

import pytest

from blockchain.artifact_registry import ArtifactRegistry
from blockchain.exceptions import AmbiguousTemplateError, TemplateNotFoundError

from conftest import VOTING_SYSTEM_ABI, write_artifact


class TestArtifactRegistry:
    """Test template lookup"""

    def test_resolve_bare_name(self, artifacts_dir):
        template = ArtifactRegistry(str(artifacts_dir)).resolve("VotingSystem")

        assert template.name == "VotingSystem"
        assert template.source_name == "contracts/VotingSystem.sol"
        assert template.qualified_name == "contracts/VotingSystem.sol:VotingSystem"
        assert template.abi == VOTING_SYSTEM_ABI
        assert template.bytecode == "0x6080604052"

    def test_resolve_qualified_name(self, artifacts_dir):
        registry = ArtifactRegistry(str(artifacts_dir))

        template = registry.resolve("contracts/VotingSystem.sol:VotingSystem")

        assert template.name == "VotingSystem"

    def test_resolve_is_cached(self, artifacts_dir):
        registry = ArtifactRegistry(str(artifacts_dir))

        first = registry.resolve("VotingSystem")
        (artifacts_dir / "contracts/VotingSystem.sol/VotingSystem.json").unlink()

        assert registry.resolve("VotingSystem") is first

    def test_missing_template(self, artifacts_dir):
        with pytest.raises(TemplateNotFoundError, match="Ballot"):
            ArtifactRegistry(str(artifacts_dir)).resolve("Ballot")

    def test_missing_qualified_template(self, artifacts_dir):
        with pytest.raises(TemplateNotFoundError):
            ArtifactRegistry(str(artifacts_dir)).resolve("contracts/Ballot.sol:Ballot")

    def test_missing_artifacts_directory(self, tmp_path):
        registry = ArtifactRegistry(str(tmp_path / "artifacts"))

        with pytest.raises(TemplateNotFoundError, match="npx hardhat compile"):
            registry.resolve("VotingSystem")

    def test_ambiguous_name(self, artifacts_dir):
        write_artifact(artifacts_dir, "contracts/legacy/VotingSystem.sol", "VotingSystem")

        with pytest.raises(AmbiguousTemplateError) as exc_info:
            ArtifactRegistry(str(artifacts_dir)).resolve("VotingSystem")

        message = str(exc_info.value)
        assert "contracts/VotingSystem.sol:VotingSystem" in message
        assert "contracts/legacy/VotingSystem.sol:VotingSystem" in message

    def test_ambiguous_name_resolved_by_qualified_name(self, artifacts_dir):
        write_artifact(artifacts_dir, "contracts/legacy/VotingSystem.sol", "VotingSystem")
        registry = ArtifactRegistry(str(artifacts_dir))

        template = registry.resolve("contracts/legacy/VotingSystem.sol:VotingSystem")

        assert template.source_name == "contracts/legacy/VotingSystem.sol"

    def test_abstract_template(self, artifacts_dir):
        write_artifact(artifacts_dir, "contracts/IVoting.sol", "IVoting", bytecode="0x")

        with pytest.raises(TemplateNotFoundError, match="can't be deployed"):
            ArtifactRegistry(str(artifacts_dir)).resolve("IVoting")

    def test_malformed_artifact(self, artifacts_dir):
        path = artifacts_dir / "contracts/Broken.sol/Broken.json"
        path.parent.mkdir(parents=True)
        path.write_text("{not json")

        with pytest.raises(TemplateNotFoundError, match="Malformed artifact"):
            ArtifactRegistry(str(artifacts_dir)).resolve("Broken")

    def test_artifact_without_bytecode_key(self, artifacts_dir):
        path = artifacts_dir / "contracts/Partial.sol/Partial.json"
        path.parent.mkdir(parents=True)
        path.write_text('{"abi": []}')

        with pytest.raises(TemplateNotFoundError, match="Malformed artifact"):
            ArtifactRegistry(str(artifacts_dir)).resolve("Partial")

    def test_list_templates(self, artifacts_dir):
        write_artifact(artifacts_dir, "contracts/IVoting.sol", "IVoting", bytecode="0x")

        templates = ArtifactRegistry(str(artifacts_dir)).list_templates()

        # Debug files and build-info are not templates
        assert templates == [
            "contracts/IVoting.sol:IVoting",
            "contracts/VotingSystem.sol:VotingSystem"
        ]

    def test_list_templates_without_directory(self, tmp_path):
        assert ArtifactRegistry(str(tmp_path / "missing")).list_templates() == []
