from __future__ import annotations

import json
from typing import List, Optional

from .models import ExistingPRContext, FileChange

PATCH_EXCERPT_CHARS = 1000

COMMIT_TYPES = ("feat", "fix", "docs", "style", "refactor", "perf", "test", "build", "ci", "chore")


def summarize_files(files: List[FileChange]) -> List[dict]:
    summaries = []
    for f in files:
        entry = {
            "filename": f.filename,
            "status": f.status,
            "additions": f.additions,
            "deletions": f.deletions,
            "changes": f.changes,
        }
        if f.patch is not None:
            entry["patch"] = f.patch[:PATCH_EXCERPT_CHARS]
        summaries.append(entry)
    return summaries


def _context_block(context: Optional[ExistingPRContext]) -> str:
    if context is None:
        return ""
    lines = []
    if context.current_title:
        lines.append(f"Current Title: {context.current_title}")
    if context.current_body:
        lines.append(f"Current Description: {context.current_body}")
    if context.base_ref and context.head_ref:
        lines.append(f"Comparing: {context.base_ref}...{context.head_ref}")
    return "\n".join(lines)


def build_prompt(files: List[FileChange], context: Optional[ExistingPRContext] = None) -> str:
    prompt = "Analyze these GitHub changes and generate a clear, concise PR title and description.\n"
    context_info = _context_block(context)
    if context_info:
        prompt += "\n" + context_info + "\n"
    prompt += (
        f"\nFiles Changed ({len(files)} files):\n"
        + json.dumps(summarize_files(files), indent=2)
        + "\n\n"
        "Please generate:\n"
        "1. A PR title following the Conventional Commits format:\n"
        "   - Format: <type>(<scope>): <description>\n"
        f"   - Types: {', '.join(COMMIT_TYPES)}\n"
        "   - Scope: optional, the area of the codebase affected\n"
        "   - Description: brief summary in imperative mood, lowercase, no period at the end\n"
        "   - Example: \"feat(auth): add OAuth2 login support\"\n"
        "   - Example: \"fix(api): resolve null pointer exception in user endpoint\"\n\n"
        "2. A well-structured PR description that includes:\n"
        "   - A brief summary of what this PR does\n"
        "   - Key changes made\n"
        "   - Any notable technical details\n\n"
        "Format your response as JSON with this exact structure:\n"
        "{\n"
        "  \"title\": \"type(scope): description following conventional commits\",\n"
        "  \"description\": \"Your PR description in markdown format here\"\n"
        "}\n\n"
        "Keep it concise and professional."
    )
    return prompt
