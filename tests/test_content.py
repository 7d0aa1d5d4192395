"""
Tests for content scope matching.
"""

from pathlib import Path

import pytest

from theme_tokens.content import ContentScope, expand_braces, glob_to_regex


class TestExpandBraces:
    """Tests for expand_braces."""

    def test_alternatives(self):
        assert expand_braces("src/**/*.{js,ts}") == ["src/**/*.js", "src/**/*.ts"]

    def test_single_alternative(self):
        assert expand_braces("src/**/*.{tsx}") == ["src/**/*.tsx"]

    def test_nested(self):
        assert expand_braces("{a,{b,c}}.js") == ["a.js", "b.js", "c.js"]

    def test_multiple_groups(self):
        assert expand_braces("{src,lib}/*.{js,ts}") == [
            "src/*.js",
            "src/*.ts",
            "lib/*.js",
            "lib/*.ts",
        ]

    def test_no_braces(self):
        assert expand_braces("index.html") == ["index.html"]


class TestGlobToRegex:
    """Tests for glob_to_regex."""

    @pytest.mark.parametrize(
        "pattern, path, expected",
        [
            ("src/**/*.tsx", "src/Button.tsx", True),
            ("src/**/*.tsx", "src/a/b/Button.tsx", True),
            ("src/*.tsx", "src/a/Button.tsx", False),
            ("**/*.html", "index.html", True),
            ("src/**", "src/a/b.js", True),
            ("file?.js", "file1.js", True),
            ("file?.js", "file10.js", False),
            ("[abc].js", "b.js", True),
            ("[!abc].js", "b.js", False),
        ],
    )
    def test_match(self, pattern, path, expected):
        assert bool(glob_to_regex(pattern).match(path)) is expected

    def test_invalid_character_class(self):
        with pytest.raises(ValueError, match="Invalid glob pattern"):
            glob_to_regex("src/[z-a].js")


class TestContentScope:
    """Tests for ContentScope."""

    @pytest.fixture
    def scope(self) -> ContentScope:
        return ContentScope(["index.html", "src/**/*.{js,ts,jsx,tsx,html,css}"])

    def test_matches(self, scope: ContentScope):
        assert scope.matches("index.html")
        assert scope.matches("./src/components/Button.tsx")
        assert scope.matches("src\\components\\Button.tsx")
        assert not scope.matches("node_modules/x/index.js")
        assert not scope.matches("public/index.html")

    def test_contains(self, scope: ContentScope):
        assert "src/main.ts" in scope
        assert 42 not in scope

    def test_negation(self):
        scope = ContentScope(["src/**/*.ts", "!src/**/*.test.ts"])

        assert scope.matches("src/app.ts")
        assert not scope.matches("src/app.test.ts")

    def test_duplicates_are_collapsed(self):
        """Test overlapping declarations do not produce duplicate patterns."""
        scope = ContentScope(["src/**/*.{ts,tsx}", "src/**/*.ts"])

        assert scope.expanded_patterns == ["src/**/*.ts", "src/**/*.tsx"]
        assert scope.duplicate_patterns == ["src/**/*.ts"]

    def test_absolute_paths_relative_to_base_dir(self, tmp_path: Path):
        scope = ContentScope(["src/**/*.ts"], base_dir=tmp_path)

        assert scope.matches(tmp_path / "src" / "main.ts")
        assert not scope.matches(tmp_path / "lib" / "main.ts")

    def test_iter_files_yields_each_file_once(self, tmp_path: Path):
        """Test overlapping patterns never double-count a file."""
        (tmp_path / "src" / "components").mkdir(parents=True)
        (tmp_path / "node_modules" / "x").mkdir(parents=True)
        for rel in [
            "index.html",
            "src/main.ts",
            "src/components/Button.tsx",
            "src/logo.svg",
            "node_modules/x/index.js",
        ]:
            (tmp_path / rel).write_text("")

        scope = ContentScope(
            ["index.html", "src/**/*.{ts,tsx}", "src/**/*.ts", "**/*.tsx"],
            base_dir=tmp_path,
        )
        found = [p.relative_to(tmp_path).as_posix() for p in scope.iter_files()]

        assert sorted(found) == ["index.html", "src/components/Button.tsx", "src/main.ts"]
        assert len(found) == len(set(found))
