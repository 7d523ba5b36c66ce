"""
Before/after crunching example.

Squeezes a few session descriptions into shrinking status-bar widths to
show how readability degrades as the budget tightens.
"""

from crunch_str import crunch, load_substitution_pack
from crunch_str.crunch import measure

DESCRIPTIONS = [
    "how are your metrics?",
    "'Twas brillig, and the slithy toves",
    "review the quarterly planning document with the team tomorrow",
]

WIDTHS = [40, 30, 20, 15, 10]

if __name__ == "__main__":
    print("=" * 60)
    print("STRING CRUNCHING — BEFORE / AFTER")
    print("=" * 60)

    for description in DESCRIPTIONS:
        print(f"\n📝 {description!r} ({len(description.encode('utf-8'))} bytes)")
        for row in measure(description, WIDTHS):
            marker = "🔤" if row["used_acronym"] else ("✂️ " if row["bytes_saved"] else "  ")
            print(f"  {row['target']:>3} {marker} {row['text']!r}  (-{row['savings_pct']}%)")

    # Team vocabulary makes the same budget go further
    print("\n" + "-" * 60)
    extra = load_substitution_pack("timetracking")
    text = DESCRIPTIONS[-1]
    print("With the timetracking substitution pack:")
    for width in WIDTHS:
        print(f"  {width:>3}    {crunch(text, width, extra_substitutions=extra)!r}")
