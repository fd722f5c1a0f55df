# AGPL-3.0 License

"""
Unit tests for prefix matching of changed paths against label rules.
"""

import pytest

from pr_labeler.labeling import ConfigurationError, LabelMatch, LabelRules, compute_labels, find_label_matches


class TestComputeLabels:
    """Tests for compute_labels."""

    def test_frontend_and_docs(self):
        """Labels apply when any path starts with one of their prefixes."""
        rules = {"frontend": ["src/components/"], "docs": ["README.md"]}
        paths = ["src/components/Button.tsx", "README.md", "server/main.go"]

        assert compute_labels(rules, paths) == {"frontend", "docs"}

    def test_no_match(self):
        """No labels when nothing matches."""
        assert compute_labels({"tests": ["__tests__/"]}, ["src/index.ts"]) == set()

    def test_overlapping_patterns_yield_every_label(self):
        """One path matching several labels gets all of them."""
        assert compute_labels({"js": ["src/"], "ts": ["src/"]}, ["src/a.ts"]) == {"js", "ts"}

    def test_prefix_is_on_full_path(self):
        """A file name deeper in the tree does not match a root-level prefix."""
        assert compute_labels({"docs": ["README.md"]}, ["src/README.md"]) == set()

    def test_empty_rules(self):
        assert compute_labels({}, ["src/test.ts", "README.md"]) == set()

    def test_empty_paths(self):
        assert compute_labels({"frontend": ["src/"]}, []) == set()

    def test_empty_rules_object(self):
        assert compute_labels(LabelRules(), ["a"]) == set()

    def test_label_reported_once(self):
        """Many matching paths and patterns still yield the label once."""
        rules = {"frontend": ["src/components/", "src/pages/"]}
        paths = [
            "src/components/Header.tsx",
            "src/components/Footer.tsx",
            "src/pages/Home.tsx",
        ]

        result = compute_labels(rules, paths)

        assert result == {"frontend"}
        assert len(result) == 1

    def test_any_pattern_any_path(self):
        """A label needs only one of its patterns to match one path."""
        rules = {
            "frontend": ["src/components/", "src/styles/"],
            "backend": ["src/api/", "server/"],
            "config": [".github/", "config/"],
        }
        paths = [
            "src/components/Header.tsx",
            "src/api/auth.ts",
            ".github/workflows/ci.yml",
            "README.md",
        ]

        assert compute_labels(rules, paths) == {"frontend", "backend", "config"}

    def test_nested_overlap(self):
        rules = {
            "javascript": ["src/", "lib/"],
            "typescript": ["src/", "types/"],
            "react": ["src/components/"],
        }
        paths = ["src/components/Button.tsx", "src/utils/helpers.ts"]

        assert sorted(compute_labels(rules, paths)) == ["javascript", "react", "typescript"]

    def test_glob_like_pattern_is_literal(self):
        """Suffix-style patterns are not globs."""
        rules = {"tests": ["*.test.ts"]}

        assert compute_labels(rules, ["src/header.test.ts"]) == set()
        assert compute_labels(rules, ["*.test.ts.snap"]) == {"tests"}

    def test_case_sensitive(self):
        assert compute_labels({"docs": ["docs/"]}, ["Docs/intro.md"]) == set()

    def test_no_separator_normalization(self):
        assert compute_labels({"src": ["src/"]}, ["src\\main.py"]) == set()

    def test_prefix_without_trailing_slash(self):
        """A prefix is a plain string comparison, not a directory boundary."""
        assert compute_labels({"api": ["api"]}, ["api_docs.md"]) == {"api"}

    def test_empty_path_matches_nothing(self):
        assert compute_labels({"all": ["a"]}, ["", "b"]) == set()

    def test_duplicate_paths_tolerated(self):
        assert compute_labels({"docs": ["docs/"]}, ["docs/a.md", "docs/a.md"]) == {"docs"}

    def test_accepts_generator_of_paths(self):
        paths = (p for p in ["src/a.ts", "docs/b.md"])

        assert compute_labels({"docs": ["docs/"], "src": ["src/"]}, paths) == {"docs", "src"}

    def test_deterministic(self):
        rules = {"a": ["x/"], "b": ["y/"], "c": ["x/y"]}
        paths = ["x/y/z", "y/1", "q"]

        first = compute_labels(rules, paths)
        second = compute_labels(rules, list(reversed(paths)))

        assert first == second == {"a", "b", "c"}

    def test_returns_frozenset(self):
        assert isinstance(compute_labels({"a": ["a"]}, ["a"]), frozenset)

    def test_no_false_negatives_or_positives(self):
        """Every returned label has a matching pair and every matching label is returned."""
        rules = {
            "frontend": ["src/components/", "src/pages/"],
            "backend": ["src/api/", "server/"],
            "docs": ["docs/", "README"],
            "infra": ["deploy/", "Dockerfile"],
            "root": ["s"],
        }
        paths = ["src/pages/index.tsx", "server/app.py", "READ", "Dockerfile.dev", "tools/x"]

        result = compute_labels(rules, paths)

        for label, patterns in rules.items():
            matched = any(path.startswith(p) for p in patterns for path in paths)
            assert (label in result) == matched
        assert result == {"frontend", "backend", "infra", "root"}

    @pytest.mark.parametrize("rules", [
        {"x": []},
        {"": ["a/"]},
        {"x": [""]},
    ])
    def test_invalid_rules_raise(self, rules):
        with pytest.raises(ConfigurationError):
            compute_labels(rules, ["a/b"])

    def test_invalid_rules_raise_even_without_paths(self):
        with pytest.raises(ConfigurationError):
            compute_labels({"x": []}, [])


class TestFindLabelMatches:
    """Tests for find_label_matches."""

    def test_first_match_per_label(self):
        rules = {"frontend": ["src/pages/", "src/components/"]}
        paths = ["src/components/A.tsx", "src/pages/B.tsx"]

        matches = find_label_matches(rules, paths)

        assert matches == [LabelMatch(label="frontend", pattern="src/pages/", path="src/pages/B.tsx")]

    def test_sorted_by_label(self):
        rules = {"zeta": ["z"], "alpha": ["a"], "mid": ["m"]}

        matches = find_label_matches(rules, ["m1", "z1", "a1"])

        assert [m.label for m in matches] == ["alpha", "mid", "zeta"]

    def test_accepts_validated_rules(self):
        rules = LabelRules.from_mapping({"docs": ["docs/"]})

        matches = find_label_matches(rules, ["docs/index.md"])

        assert matches[0].path == "docs/index.md"

    def test_no_matches(self):
        assert find_label_matches({"docs": ["docs/"]}, ["src/a.py"]) == []
