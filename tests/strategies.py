"""Hypothesis strategies for property-based testing of guard_fluently."""

import string

from hypothesis import strategies as st

# -----------------------------------------------------------------------------
# Basic value strategies
# -----------------------------------------------------------------------------

texts = st.text(min_size=0, max_size=40)
# Case round-trips are lossless for ASCII only ("ß".upper() == "SS")
ascii_texts = st.text(alphabet=string.ascii_letters + string.digits + " .-", max_size=40)
non_empty_texts = st.text(min_size=1, max_size=40)
lengths = st.integers(min_value=0, max_value=60)

# Padding made of the whitespace str.strip() removes
paddings = st.text(alphabet=" \t\n", max_size=4)

# -----------------------------------------------------------------------------
# Wildcard strategies
# -----------------------------------------------------------------------------

# Small alphabet so generated subjects and patterns overlap often
wildcard_subjects = st.text(alphabet="ab.c", max_size=8)

wildcard_patterns = st.text(alphabet="ab.c*?", min_size=1, max_size=6)

# Pattern characters that are regex metacharacters but literal in wildcards
regex_metacharacters = st.sampled_from(list(".^$+()[]{}|\\"))
