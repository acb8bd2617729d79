def banner(msg: str) -> str:
    """
    Create a banner for the given message.
    Example:
    msg = "Hello, World!"
    print -> "#################"
             "# Hello, World! #"
             "#################"
    """
    lines = msg.splitlines() or [""]
    width = max(len(line) for line in lines)
    border = "#" * (width + 4)
    body = "\n".join(f"# {line.ljust(width)} #" for line in lines)
    return f"{border}\n{body}\n{border}"
