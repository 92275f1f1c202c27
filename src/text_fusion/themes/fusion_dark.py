from textual.theme import Theme

# Fusion Dark: neutral slate surfaces, green/red reserved for match and difference
THEMES = [
    Theme(
        name="fusion-dark",
        primary="#5E81AC",
        secondary="#4C566A",
        warning="#EBCB8B",
        error="#CC0000",
        success="#009900",
        accent="#88C0D0",
        foreground="#E5E9F0",
        background="#1E222A",
        surface="#2A2F3A",
        panel="#171A21",
        dark=True,
    )
]
