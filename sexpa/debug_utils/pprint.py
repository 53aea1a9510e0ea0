from sexpa.types.arena import Arena


def format_arena(arena: Arena) -> str:
    """Tab-separated `id<TAB>node` table, one line per node in id order."""
    return "\n".join(f"{node_id}\t{arena[node_id]}" for node_id in arena)
