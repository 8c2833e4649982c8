#!/usr/bin/env python3
"""
Basic usage example for codingkeys.

Generates CodingKeys tables for a struct, an enum and a set of HTTP headers,
each with a different naming style.
"""

from codingkeys import Declaration, Member, generate_coding_keys


def main():
    """Demonstrate CodingKeys generation."""
    print("codingkeys - Basic Usage Example")
    print("=" * 60)

    user = Declaration.struct("User", [
        Member.stored("firstName"),
        Member.stored("lastName"),
        Member.stored("age"),
        Member.stored("state"),
        Member.computed("displayName"),
    ])
    state = Declaration.enum("State", ["active", "inactive", "suspended", "closed"])
    headers = Declaration.struct("Headers", [
        Member.stored("contentType"),
        Member.stored("contentSecurityPolicy"),
        Member.stored("cacheControl"),
    ])

    for declaration, style in [(user, "snake_case"), (state, "uppercase"), (headers, "httpHeaderCase")]:
        result = generate_coding_keys(declaration, style)
        print(f"\n{declaration.name} ({style}):")
        print(result.content if result.content else "(nothing generated)")


if __name__ == "__main__":
    main()
