"""Passcraft -- Streamlit web interface."""

import streamlit as st

from passcraft import (
    CharClass,
    EmptyAlphabetError,
    GenerationConfig,
    Mode,
    Rating,
    add_custom_word,
    assess,
    build_alphabet,
    generate,
    remove_custom_word,
)

# ── Lucide icons (from lucide.dev) ────────────────────────────────────────

_LUCIDE = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round">{paths}</svg>'
)

ICON_KEY_ROUND = _LUCIDE.format(s=32, paths=(
    '<path d="M2.586 17.414A2 2 0 0 0 2 18.828V21a1 1 0 0 0 1 1h3'
    'a1 1 0 0 0 1-1v-1a1 1 0 0 1 1-1h1a1 1 0 0 0 1-1v-1'
    'a1 1 0 0 1 1-1h.172a2 2 0 0 0 1.414-.586l.814-.814'
    'a6.5 6.5 0 1 0-4-4z"/>'
    '<circle cx="16.5" cy="7.5" r=".5" fill="currentColor"/>'
))

# Colour and bar fill per rating.
_METER = {
    Rating.WEAK:   ("#ff4500", 0.25),
    Rating.FAIR:   ("#ffa500", 0.5),
    Rating.GOOD:   ("#90ee90", 0.75),
    Rating.STRONG: ("#008000", 1.0),
}

# ── Page config ───────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Password Generator",
    page_icon="\U0001f511",
    layout="centered",
)

if "custom_words" not in st.session_state:
    st.session_state.custom_words = ()
if "password" not in st.session_state:
    st.session_state.password = None
    # Rated against the alphabet it was drawn from, not the current widgets.
    st.session_state.report = None

# ── Header ────────────────────────────────────────────────────────────────

st.markdown(
    f'<h1 style="display:flex;align-items:center;gap:10px">'
    f'{ICON_KEY_ROUND} Password Generator</h1>',
    unsafe_allow_html=True,
)
st.caption(
    "Passwords are generated locally from a cryptographically secure "
    "random source and are never stored or sent anywhere."
)

# ── Settings ──────────────────────────────────────────────────────────────

mode_label = st.radio("Mode", ["Password", "PIN"], horizontal=True)
mode = Mode.PIN if mode_label == "PIN" else Mode.PASSWORD

col1, col2 = st.columns(2)
with col1:
    length = st.slider("Length", 4, 64, 16)
    avoid_ambiguous = st.checkbox("Avoid ambiguous characters (I, l, O, 0, 1)")
with col2:
    pin_mode = mode is Mode.PIN
    flags = {
        CharClass.UPPER: st.checkbox("Uppercase", value=True, disabled=pin_mode),
        CharClass.LOWER: st.checkbox("Lowercase", value=True, disabled=pin_mode),
        CharClass.DIGIT: st.checkbox("Digits", value=True, disabled=pin_mode),
        CharClass.SYMBOL: st.checkbox("Symbols", value=True, disabled=pin_mode),
    }

# ── Custom words ──────────────────────────────────────────────────────────

if not pin_mode:
    with st.form("add_word", clear_on_submit=True):
        word_col, btn_col = st.columns([4, 1])
        with word_col:
            new_word = st.text_input(
                "Custom word",
                placeholder="Word to include…",
                label_visibility="collapsed",
            )
        with btn_col:
            if st.form_submit_button("Add"):
                st.session_state.custom_words = add_custom_word(
                    st.session_state.custom_words, new_word,
                )

    for i, word in enumerate(st.session_state.custom_words):
        w_col, x_col = st.columns([4, 1])
        w_col.markdown(f"`{word}`")
        if x_col.button("×", key=f"remove_{i}"):
            st.session_state.custom_words = remove_custom_word(
                st.session_state.custom_words, i,
            )
            st.rerun()

config = GenerationConfig(
    mode=mode,
    length=length,
    classes=frozenset(c for c, on in flags.items() if on),
    avoid_ambiguous=avoid_ambiguous,
    custom_words=st.session_state.custom_words,
)

# ── Generate ──────────────────────────────────────────────────────────────

if st.button("Generate password", type="primary", key="generate"):
    try:
        pwd = generate(config).text
        st.session_state.password = pwd
        st.session_state.report = assess(pwd, build_alphabet(config).size)
    except EmptyAlphabetError:
        st.session_state.password = None
        st.error("Please select at least one character type for password generation.")

pwd = st.session_state.password
if pwd:
    st.code(pwd, language=None)
    st.download_button(
        "Download as .txt",
        data=pwd,
        file_name="generated-password.txt",
        mime="text/plain",
    )

    report = st.session_state.report
    color, fill = _METER[report.rating]
    st.markdown(
        f"**Strength:** <span style='color:{color}'>{report.rating.value}</span>"
        f" &nbsp;·&nbsp; {report.entropy_bits:.1f} bits of entropy",
        unsafe_allow_html=True,
    )
    st.progress(fill)
