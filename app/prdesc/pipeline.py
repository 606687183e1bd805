from __future__ import annotations

from .ai_integration import generate_title_and_description, get_gemini_model
from .config import Settings, mask
from .github_utils import fetch_comparison, fetch_pull_request, get_github_client, update_pr_description
from .models import CompareTarget, ExistingPRContext, GeneratedContent, PullRequestTarget
from .url_parsing import parse_github_url

RULE = "─" * 80


def _print_generated(generated: GeneratedContent, header: str):
    print(f"\n📝 {header}:")
    print(RULE)
    print(f"Title: {generated.title}")
    print("\nDescription:")
    print(generated.description)
    print(RULE)


def _run_pull_request(target: PullRequestTarget, gh, model, settings: Settings) -> int:
    print("\n📄 STEP 2: Fetching PR changes")
    print("-" * 30)
    pr, files = fetch_pull_request(gh, target)

    print(f"\n📄 STEP 3: Generating title and description with {settings.gemini_model}")
    print("-" * 30)
    generated = generate_title_and_description(
        model,
        files,
        ExistingPRContext(
            current_title=pr.title,
            current_body=pr.body,
            base_ref=pr.base_ref,
            head_ref=pr.head_ref,
        ),
        max_output_tokens=settings.max_output_tokens,
        prompt_preview_chars=settings.prompt_preview_chars,
        output_preview_chars=settings.output_preview_chars,
    )
    _print_generated(generated, "Generated Content")

    print("\n💡 Suggested title:")
    print(f"   {generated.title}")
    print(f"   Current title: {pr.title}")

    print("\n📄 STEP 4: Updating pull request")
    print("-" * 30)
    update_pr_description(gh, target, generated.description, pull=pr.pull)

    print("\n🎉 SUCCESS!")
    print("=" * 50)
    print(f"✅ Updated description of PR #{target.number}")
    print(f"🔗 View at: {pr.html_url}")
    print("\n💭 Note: Title was not automatically updated. You can update it manually if desired.")
    return 0


def _run_compare(target: CompareTarget, gh, model, settings: Settings) -> int:
    print("\n📄 STEP 2: Fetching comparison changes")
    print("-" * 30)
    files = fetch_comparison(gh, target)
    if not files:
        print("\n⚠️  No file changes found in this comparison.")
        return 0

    print(f"\n📄 STEP 3: Generating title and description with {settings.gemini_model}")
    print("-" * 30)
    generated = generate_title_and_description(
        model,
        files,
        ExistingPRContext(base_ref=target.base, head_ref=target.head),
        max_output_tokens=settings.max_output_tokens,
        prompt_preview_chars=settings.prompt_preview_chars,
        output_preview_chars=settings.output_preview_chars,
    )
    _print_generated(generated, "Generated PR Content")

    print("\n🎉 SUCCESS!")
    print("=" * 50)
    print("✅ Generated title and description!")
    print("\n💡 Use these when creating your PR:")
    print(f"   Compare URL: {target.html_url}")
    return 0


def run_pipeline(url: str, settings: Settings) -> int:
    print("📄 STEP 1: Parsing GitHub URL")
    print("-" * 30)
    target = parse_github_url(url)
    print(f"   Owner: {target.owner}")
    print(f"   Repo: {target.repo}")
    if isinstance(target, PullRequestTarget):
        print("   Type: Pull Request")
        print(f"   PR #: {target.number}")
    else:
        print("   Type: Compare")
        print(f"   Comparing: {target.basehead}")

    print(f"🔗 Connecting to GitHub ({settings.github_api_url}, token {mask(settings.github_token)})")
    gh = get_github_client(settings.github_token, settings.github_api_url)
    model = get_gemini_model(settings.gemini_api_key, settings.gemini_model)

    if isinstance(target, PullRequestTarget):
        return _run_pull_request(target, gh, model, settings)
    return _run_compare(target, gh, model, settings)
