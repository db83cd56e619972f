"""Fixed content written by ``lfg init``."""

from __future__ import annotations

DIRECTORIES: tuple[str, ...] = (
    ".devcontainer",
    ".github/workflows",
    "docs/architecture",
    "docs/api",
    "docs/prompts",
    "src/domain",
    "src/adapters",
    "tests",
    "scripts",
)

PACKAGE_SCRIPTS: dict[str, str] = {
    "dev": "bun run src/index.ts",
    "test": "bun test",
    "context:build": "sh scripts/update-context.sh && sh scripts/generate-full-dump.sh",
    "p": "sh scripts/compose-prompt.sh",
    "precommit": "bun run context:build && git add llms.txt llms-full.txt",
}

DEVCONTAINER: dict[str, object] = {
    "name": "Bun Agentic Environment",
    "image": "mcr.microsoft.com/devcontainers/base:bookworm",
    "features": {
        "ghcr.io/devcontainers/features/github-cli:1": {},
        "ghcr.io/devcontainers/features/python:1": {},
        "ghcr.io/oven-sh/bun/bun:1": {"version": "latest"},
    },
    "customizations": {
        "vscode": {
            "settings": {
                "terminal.integrated.defaultProfile.linux": "zsh",
                "editor.formatOnSave": True,
            },
            "extensions": [
                "GitHub.copilot",
                "GitHub.copilot-chat",
                "oven.bun-vscode",
                "tamasfe.even-better-toml",
                "bpruitt-goddard.mermaid-markdown-syntax-highlighting",
            ],
        }
    },
    "postCreateCommand": "bun install && pip install lfg-bootstrap && echo 'Environment Ready. Agent Active.'",
}

CI_WORKFLOW = r"""name: Quality Gate
on: [push, pull_request]
jobs:
  verify:
    runs-on: ubuntu-latest
    steps:
      - uses: actions/checkout@v4
      - uses: oven-sh/setup-bun@v1
      - uses: actions/setup-python@v5
        with:
          python-version: "3.12"
      - run: bun install
      - run: pip install lfg-bootstrap
      - name: Verify Context Drift
        run: |
          bun run context:build
          git diff --exit-code || (echo "Context out of sync. Run context:build." && exit 1)
      - name: Test
        run: bun test
      - name: No Emoji Policy
        run: |
          if grep -P "[\x{1F600}-\x{1F64F}]" -r src docs; then
            echo "Error: Emojis detected. Strict text-only policy active."
            exit 1
          fi
"""

AGENTS_MD = """# MISSION & PROTOCOLS
> Authority: Primary instruction set for AI Agents.

## 1. STYLE & TONE DIRECTIVES
- **NO EMOJIS:** Do not use emojis in code, comments, commits, or documentation. Pure text only.
- **Tone:** Professional, technical, concise (High Semantic Density).
- **Language:** English (Code/Comments), User Preference (Chat).

## 2. TECHNICAL DIRECTIVES
- **Runtime:** Bun (Strict Mode).
- **Architecture:** Hexagonal / Ports & Adapters.
- **Testing:** Test-Driven Development (TDD) is mandatory.

## 3. OPERATIONAL RULES
- Do not generate code without analyzing architecture first.
- Use strict typing (no 'any').
- Pure Functions preferred.
- **README MUTATION:** Upon implementing the first domain feature, REWRITE README.md to reflect the specific project purpose. Move the 'Architecture Taxonomy' section to a 'System Appendix' at the bottom.
"""

README_EN = """# {{ project_title }}

> Status: Initialized. Ready for Domain Implementation.

## Operational Workflows

### 0. Genesis (System Instantiation)
Executed via ephemeral bootstrapper to generate this architecture (Reference only):
```bash
lfg init
```

### 1. Hydration
Execute immediately (if not already done) to install dependencies:
```bash
bun install
pip install lfg-bootstrap
```

### 2. Autonomous Operation
The System is designed for Agentic Control.
**Handover Instruction:** Instruct your AI Agent to ingest `llms-full.txt` and run `bun test`.

## Architecture Taxonomy
- **`AGENTS.md`**: The prescriptive rule set. Defines behavior and strict operational constraints.
- **`llms.txt`**: The machine-readable index. Follows [llmstxt.org](https://llmstxt.org).
- **`llms-full.txt`**: A compiled, XML-encapsulated snapshot for one-shot prompting.

## Quality Gates
CI enforces: No Context Drift, No Emojis, Green Tests.
"""

README_DE = """# {{ project_title }} (DE)

> Status: Initialisiert. Bereit für Domänen-Implementierung.

## Operative Arbeitsabläufe

### 0. Genese (System-Instanziierung)
Ausgeführt durch den ephemeren Bootstrapper zur Generierung dieser Architektur (Nur Referenz):
```bash
lfg init
```

### 1. Hydratisierung
Sofort ausführen (falls noch nicht geschehen), um Abhängigkeiten zu installieren:
```bash
bun install
pip install lfg-bootstrap
```

### 2. Autonomer Betrieb
Das System ist für agentische Steuerung ausgelegt.
**Übergabe-Instruktion:** Weisen Sie Ihren AI-Agenten an, `llms-full.txt` zu erfassen und `bun test` auszuführen.

## Architektur-Taxonomie
- **`AGENTS.md`**: Das preskriptive Regelwerk. Definiert Verhalten und operative Restriktionen.
- **`llms.txt`**: Der maschinenlesbare Index. Folgt [llmstxt.org](https://llmstxt.org).
- **`llms-full.txt`**: Ein kompilierter, XML-gekapselter Snapshot für One-Shot-Prompting.

## Qualitäts-Schranken
CI erzwingt: Keinen Kontext-Drift, Keine Emojis, Grüne Tests.
"""

GITIGNORE = "node_modules\ndist\n.DS_Store\nllms-full.txt\nllms.txt\n"

SRC_INDEX = """/**
 * System Entry Point
 * Used to verify runtime integrity during bootstrap.
 */
export function systemStatus(): string {
  return "OPERATIONAL";
}

if (import.meta.main) {
  console.log(`System Status: ${systemStatus()}`);
}
"""

TEST_INTEGRITY = """import { describe, test, expect } from "bun:test";
import { existsSync } from "node:fs";
import { systemStatus } from "../src/index";

describe("Architectural Integrity", () => {
  test("Core artifacts must exist", () => {
    expect(existsSync("AGENTS.md")).toBe(true);
    expect(existsSync("package.json")).toBe(true);
    expect(existsSync("README.md")).toBe(true);
  });

  test("Directory structure must be valid", () => {
    expect(existsSync("src")).toBe(true);
    expect(existsSync("docs")).toBe(true);
    expect(existsSync("tests")).toBe(true);
  });

  test("Runtime is operational", () => {
    expect(systemStatus()).toBe("OPERATIONAL");
  });
});
"""

SCRIPT_UPDATE_CONTEXT = """#!/bin/sh
exec lfg context index .
"""

SCRIPT_FULL_DUMP = """#!/bin/sh
exec lfg context dump .
"""

SCRIPT_COMPOSE = """#!/bin/sh
exec lfg prompt --root . "$@"
"""

PROMPT_BOOT = """# SYSTEM INIT
Input: XML Project Snapshot.
Action: Index files. Internalize AGENTS.md rules.
Response: "Ready." only. No emojis."""

PROMPT_FEATURE = """# NEW FEATURE
User Request: "{{USER_INPUT}}"
Action: Analyze context. Implement strictly typed solution. Output Code only. No Emojis."""


__all__ = [
    "AGENTS_MD",
    "CI_WORKFLOW",
    "DEVCONTAINER",
    "DIRECTORIES",
    "GITIGNORE",
    "PACKAGE_SCRIPTS",
    "PROMPT_BOOT",
    "PROMPT_FEATURE",
    "README_DE",
    "README_EN",
    "SCRIPT_COMPOSE",
    "SCRIPT_FULL_DUMP",
    "SCRIPT_UPDATE_CONTEXT",
    "SRC_INDEX",
    "TEST_INTEGRITY",
]
