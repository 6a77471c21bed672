def class_tokens(class_name):
    return set((class_name or "").split())


def join_class_tokens(tokens):
    return " ".join(sorted(tokens))
