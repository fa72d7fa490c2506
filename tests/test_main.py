"""
Tests for the command line interface.
"""

import json

import pytest
from typer.testing import CliRunner

from pratilipi.main import app
from pratilipi.utils.config import config

runner = CliRunner()


@pytest.fixture
def candidate_file(tmp_path):
    """Fixture providing a candidate that reuses a reference venture name."""
    path = tmp_path / "candidate.json"
    path.write_text(json.dumps({
        "title": "CircuitHub",
        "description": "On-demand electronics manufacturing powered by our factory-scale robotics platform",
        "industry": "Industrials",
    }))
    return path


@pytest.fixture
def unrelated_candidate_file(tmp_path):
    """Fixture providing a candidate unlike every reference venture."""
    path = tmp_path / "candidate.json"
    path.write_text(json.dumps({
        "title": "Beekeeper Ledger",
        "description": "Hive health journal for hobby beekeepers tracking queens and honey yields",
    }))
    return path


class TestCheckCommand:
    """Tests for the check command."""

    def test_reject_exits_with_code_two(self, candidate_file):
        result = runner.invoke(app, ["check", str(candidate_file), "--provider", "none"])

        assert result.exit_code == 2
        assert "REJECT" in result.stdout
        assert "CircuitHub" in result.stdout

    def test_approve(self, unrelated_candidate_file):
        result = runner.invoke(app, ["check", str(unrelated_candidate_file), "--provider", "none"])

        assert result.exit_code == 0
        assert "APPROVE" in result.stdout

    def test_internal_corpus_excludes_owner(self, candidate_file, tmp_path):
        corpus_file = tmp_path / "applications.json"
        corpus_file.write_text(json.dumps([
            {"title": "CircuitHub", "description": "Robotics electronics manufacturing", "ownerId": "me", "status": "SUBMITTED"},
        ]))

        result = runner.invoke(app, [
            "check", str(candidate_file), "--corpus", str(corpus_file),
            "--internal", "--exclude-owner", "me", "--provider", "none",
        ])

        assert result.exit_code == 0
        assert "APPROVE" in result.stdout

    def test_invalid_candidate(self, tmp_path):
        path = tmp_path / "candidate.json"
        path.write_text(json.dumps({"title": "", "description": "Something"}))

        result = runner.invoke(app, ["check", str(path), "--provider", "none"])

        assert result.exit_code == 1

    def test_unknown_provider(self, unrelated_candidate_file):
        result = runner.invoke(app, ["check", str(unrelated_candidate_file), "--provider", "llama"])

        assert result.exit_code == 1
        assert "Unsupported AI provider" in result.stdout

    def test_unknown_configured_provider_degrades(self, monkeypatch, unrelated_candidate_file):
        monkeypatch.setattr(config, "ai_provider", "anthropic")

        result = runner.invoke(app, ["check", str(unrelated_candidate_file)])

        assert result.exit_code == 0
        assert "deterministic" in result.stdout

    def test_invalid_policy_file(self, monkeypatch, tmp_path, unrelated_candidate_file):
        policy_file = tmp_path / "similarity.yaml"
        policy_file.write_text("rejection_threshold: 7\n")
        monkeypatch.setattr(config, "policy_file", policy_file)

        result = runner.invoke(app, ["check", str(unrelated_candidate_file), "--provider", "none"])

        assert result.exit_code == 1


class TestVenturesCommand:
    """Tests for the ventures command."""

    def test_category(self):
        result = runner.invoke(app, ["ventures", "--category", "fintech"])

        assert result.exit_code == 0
        assert "Stripe" in result.stdout
        assert "Coinbase" in result.stdout
        assert "Airbnb" not in result.stdout


class TestDoctorCommand:
    """Tests for the doctor command."""

    def test_disabled(self):
        result = runner.invoke(app, ["doctor", "--provider", "none"])

        assert result.exit_code == 0
        assert "disabled" in result.stdout
