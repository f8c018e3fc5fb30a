import re

# Preparation words that do not change what goes on the shopping list
DESCRIPTORS = (
    "to taste", "for garnish", "for serving",
    "fresh", "freshly", "chopped", "minced", "diced", "sliced", "grated",
    "crushed", "peeled", "softened", "melted", "optional",
    "large", "medium", "small", "whole",
)


def normalize_ingredient_key(name: str) -> str:
    """
    Normalize an ingredient name to the key shopping-list lines are grouped by.

    "Garlic Cloves (minced)" and "fresh garlic clove" both become
    "garlic clove".
    """
    if not name:
        return ""

    s = name.lower()

    # "Butter (softened)" -> "butter "
    s = re.sub(r'\(.*?\)', '', s)

    # Keep letters, numbers, spaces; "all-purpose" -> "all purpose"
    s = re.sub(r'[^\w\s]', ' ', s)
    s = re.sub(r'\s+', ' ', s).strip()

    for desc in DESCRIPTORS:
        s = re.sub(rf'\b{desc}\b', '', s)
    s = re.sub(r'\s+', ' ', s).strip()

    # Naive singular: "onions" -> "onion", but not "glass"
    words = []
    for w in s.split():
        if len(w) > 3 and w.endswith('s') and not w.endswith('ss'):
            words.append(w[:-1])
        else:
            words.append(w)

    return " ".join(words)
