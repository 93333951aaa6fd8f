"""
Visualization and reporting utilities.
"""

from .core.state import SearchState, SolveStatus


def print_state(state: SearchState):
    """Print a summary of the current working set."""
    print(f"\n{'='*60}")
    print(f"Step: {state.step}")
    print(f"Working set ({len(state.working_set)}):")
    for h in state.working_set:
        if h.source:
            src = f" (from {h.source[0]} + {h.source[1]}, {h.rule})"
        elif h.label:
            src = f"  [{h.label}]"
        else:
            src = ""
        print(f"  {h.name}{src}")
    print(f"{'='*60}")


def print_history(state: SearchState):
    """Print the derivation log, one line per step."""
    print(f"\n{'='*60}")
    print("Derivation log:")
    print(f"{'='*60}")
    if not state.history:
        print("  (nothing derived)")
    for entry in state.history:
        first, second = entry["combined"]
        via = entry.get("attempt", "direct")
        rule = entry["rule"] if via == "direct" else f"{entry['rule']}, {via}"
        print(f"  Step {entry['step']}: {first}  +  {second}  -> "
              f"{entry['produced']}  [{rule}]")


def print_result(state: SearchState):
    """Print the conclusion, or say that none was reached."""
    print(f"\n{'='*60}")
    if state.status is SolveStatus.SOLVED:
        print(f"Result : {state.result.name}")
    else:
        print(f"No solution found ({state.halt_reason}); "
              f"{len(state.working_set)} hypotheses left.")
    print(f"{'='*60}")


def export_dot(state: SearchState, path="arglogic_graph.dot"):
    """Export the derivation graph as a DOT file for Graphviz visualization."""
    with open(path, "w") as f:
        f.write("digraph arglogic {\n")
        f.write("  rankdir=BT;\n")
        f.write("  node [shape=box, style=rounded];\n")

        for entry in state.history:
            label = entry["produced"].replace('"', '\\"')
            f.write(f'  "{label}" [fillcolor=lightgray, style=filled];\n')
            for parent in entry["combined"]:
                parent_label = parent.replace('"', '\\"')
                f.write(f'  "{parent_label}" -> "{label}" [label="{entry["rule"]}"];\n')
        for h in state.working_set:
            label = h.name.replace('"', '\\"')
            f.write(f'  "{label}" [fillcolor=lightblue, style=filled];\n')
        f.write("}\n")
    print(f"Graph exported to {path}")
