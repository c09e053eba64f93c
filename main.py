"""
main.py — DSA Trace Visualizer Flask App
=========================================
JSON API in front of the step-trace engines.  The browser UI renders
steps; this server only generates, stores and replays them.

Routes:
  GET  /api/algorithms              – algorithm cards plus the BST / graph cards
  POST /api/array/random            – new random input array
  POST /api/run                     – generate the trace for an array algorithm
  POST /api/step/<action>           – next | prev | goto | rewind | end | play | pause | toggle | tick | speed
  GET  /api/state                   – playback state of every panel
  GET  /api/trace                   – every step of a panel (client-side replay)
  POST /api/compare                 – two algorithms, same input, side by side
  POST /api/ds/<action>             – reset | push | pop | demo   (interactive stack / queue)
  POST /api/tree/<action>           – insert | search | traverse | reset
  POST /api/graph/<action>          – load | bfs | dfs | shortest-path

State management:
  Each session cookie holds only a workspace id.  Traces, the BST root and
  the loaded graph live in a process-local WorkspaceStore (could move to
  Redis for production).

Errors:
  Validation and capacity failures raise TraceError subclasses and come
  back as 400 {"error": message}.
"""

import logging
import random
from dataclasses import asdict
from typing import Any, Dict, Optional

from flask import Flask, current_app, jsonify, request, session

from algorithms import (
    AlgorithmKind,
    STRUCTURE_INFO,
    InputValidationError,
    Step,
    TraceError,
    bfs,
    demo_operations,
    dfs,
    find_shortest_path,
    insert_node,
    list_algorithms,
    pop_value,
    push_value,
    search_tree,
    traverse_tree,
)
from config import Config
from engine import (
    Recorder,
    Stepper,
    WorkspaceStore,
    compare,
    parse_array_input,
    parse_value,
    require_node,
    validate_array,
)
from engine.stepper import SPEED_PRESETS
from engine.workspace import PANELS, Workspace
from structures import GraphData

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(overrides: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.from_prefixed_env("VISUALIZER")
    if overrides:
        app.config.update(overrides)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.extensions["workspaces"] = WorkspaceStore(
        max_size=app.config["WORKSPACE_MAX"],
        idle_ttl=app.config["WORKSPACE_IDLE_TTL"],
    )

    app.register_error_handler(TraceError, _handle_trace_error)
    _register_routes(app)
    return app


def _handle_trace_error(exc: TraceError):
    logger.info("rejected %s %s: %s", request.method, request.path, exc)
    return jsonify({"error": str(exc)}), 400


# ---------------------------------------------------------------------------
# Session / payload helpers
# ---------------------------------------------------------------------------
def get_workspace() -> Workspace:
    store: WorkspaceStore = current_app.extensions["workspaces"]
    wid = session.get("workspace")
    if wid is None:
        wid = session["workspace"] = store.new_id()
    return store.get(wid)


def payload() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def playback(stepper: Stepper) -> Dict[str, Any]:
    step = stepper.current_step
    return {
        "step":         step.to_dict() if step else None,
        "current_step": stepper.current_idx,
        "total_steps":  stepper.total_steps,
        "state":        stepper.state.value,
        "speed":        stepper.speed,
    }


def trace(steps) -> Dict[str, Any]:
    return {"steps": [s.to_dict() for s in steps], "total_steps": len(steps)}


def read_array(data: Dict[str, Any], ws: Optional[Workspace] = None):
    cfg = current_app.config
    if "text" in data:
        return parse_array_input(str(data["text"]), cfg["MIN_ARRAY_SIZE"], cfg["MAX_ARRAY_SIZE"])
    if "array" in data:
        return validate_array(data["array"], cfg["MIN_ARRAY_SIZE"], cfg["MAX_ARRAY_SIZE"])
    if ws is not None and ws.array:
        return list(ws.array)
    raise InputValidationError("Provide 'array' or 'text'")


def run_recorder(algorithm, array) -> Recorder:
    rec = Recorder()
    rec.start(algorithm, array)
    rec.run_to_completion()
    rec.stepper.set_speed(current_app.config["DEFAULT_SPEED"])
    return rec


def _register_routes(app: Flask) -> None:

    # -----------------------------------------------------------------------
    # Registry & input
    # -----------------------------------------------------------------------
    @app.get("/api/algorithms")
    def api_algorithms():
        return jsonify({
            "algorithms": [info.to_dict() for info in list_algorithms()],
            "structures": [card.to_dict() for card in STRUCTURE_INFO.values()],
        })

    @app.post("/api/array/random")
    def api_array_random():
        cfg  = current_app.config
        data = payload()
        size = data.get("size", cfg["RANDOM_ARRAY_SIZE"])
        if isinstance(size, bool) or not isinstance(size, int):
            raise InputValidationError("size must be an integer")
        if not cfg["MIN_ARRAY_SIZE"] <= size <= cfg["MAX_ARRAY_SIZE"]:
            raise InputValidationError(
                f"size must be between {cfg['MIN_ARRAY_SIZE']} and {cfg['MAX_ARRAY_SIZE']}"
            )
        seed = data.get("seed")
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, (int, str))):
            raise InputValidationError("seed must be an integer or a string")
        rng = random.Random(seed)
        array = [rng.randint(cfg["RANDOM_VALUE_MIN"], cfg["RANDOM_VALUE_MAX"]) for _ in range(size)]

        ws = get_workspace()
        with ws.lock:
            ws.array = array
        return jsonify({"array": array})

    # -----------------------------------------------------------------------
    # Array algorithms
    # -----------------------------------------------------------------------
    @app.post("/api/run")
    def api_run():
        data = payload()
        ws   = get_workspace()
        with ws.lock:
            array = read_array(data, ws)
            rec   = run_recorder(data.get("algorithm", AlgorithmKind.BUBBLE_SORT), array)
            ws.array    = array
            ws.recorder = rec
            body = playback(rec.stepper)
            body["algorithm"] = rec.algo_info.label
            body["metrics"]   = asdict(rec.metrics)
        return jsonify(body)

    @app.post("/api/compare")
    def api_compare():
        data  = payload()
        ws    = get_workspace()
        with ws.lock:
            array = read_array(data, ws)
        left  = run_recorder(data.get("algorithm_a", AlgorithmKind.BUBBLE_SORT), array)
        right = run_recorder(data.get("algorithm_b", AlgorithmKind.QUICK_SORT), array)
        return jsonify(compare(left, right).to_dict())

    # -----------------------------------------------------------------------
    # Playback
    # -----------------------------------------------------------------------
    @app.post("/api/step/<action>")
    def api_step(action: str):
        data  = payload()
        panel = data.get("panel", "array")
        if panel not in PANELS:
            raise InputValidationError(f"Unknown panel {panel!r}")

        ws = get_workspace()
        with ws.lock:
            stepper = ws.stepper_for(panel)
            if action == "next":
                stepper.next_step()
            elif action == "prev":
                stepper.prev_step()
            elif action == "goto":
                index = data.get("index")
                if isinstance(index, bool) or not isinstance(index, int) or not stepper.goto_step(index):
                    raise InputValidationError(f"Step index {index!r} is out of range")
            elif action == "rewind":
                stepper.rewind()
            elif action == "end":
                stepper.jump_to_end()
            elif action == "play":
                stepper.play()
            elif action == "toggle":
                stepper.toggle_play()
            elif action == "pause":
                stepper.pause()
            elif action == "tick":
                stepper.tick()
            elif action == "speed":
                if "multiplier" in data:
                    try:
                        stepper.set_speed_multiplier(float(data["multiplier"]))
                    except (TypeError, ValueError):
                        raise InputValidationError("multiplier must be a positive number") from None
                else:
                    preset = data.get("preset", "medium")
                    if preset not in SPEED_PRESETS:
                        raise InputValidationError(f"Unknown speed preset {preset!r}")
                    stepper.set_speed(preset)
            else:
                return jsonify({"error": f"Unknown action {action!r}"}), 404
            return jsonify(playback(stepper))

    @app.get("/api/state")
    def api_state():
        ws = get_workspace()
        with ws.lock:
            body = {panel: playback(ws.stepper_for(panel)) for panel in PANELS}
            body["algorithm"] = ws.recorder.algo_info.label if ws.recorder else None
            body["array"]["input"] = list(ws.array)
            body["ds"]["kind"] = ws.ds_kind.label
        return jsonify(body)

    @app.get("/api/trace")
    def api_trace():
        panel = request.args.get("panel", "array")
        if panel not in PANELS:
            raise InputValidationError(f"Unknown panel {panel!r}")
        ws = get_workspace()
        with ws.lock:
            if panel == "array" and ws.recorder:
                return jsonify(ws.recorder.export())
            return jsonify(trace(ws.stepper_for(panel).steps))

    # -----------------------------------------------------------------------
    # Interactive stack / queue
    # -----------------------------------------------------------------------
    @app.post("/api/ds/<action>")
    def api_ds(action: str):
        data = payload()
        ws   = get_workspace()
        with ws.lock:
            if action == "reset":
                kind = AlgorithmKind.parse(data.get("kind", ws.ds_kind))
                if kind.is_sorting:
                    raise InputValidationError(f"{kind.label} is not a stack or queue")
                ws.reset_ds(kind)
            elif action == "push":
                value = parse_value(data.get("value"))
                history = push_value(
                    ws.ds.steps, ws.ds.current_idx, ws.ds_kind, value,
                    capacity=current_app.config["STRUCTURE_CAPACITY"],
                )
                ws.ds.branch(history[-1])
            elif action == "pop":
                history = pop_value(ws.ds.steps, ws.ds.current_idx, ws.ds_kind)
                ws.ds.branch(history[-1])
            elif action == "demo":
                ws.ds.load(demo_operations(ws.ds_kind))
                ws.ds.play()
            else:
                return jsonify({"error": f"Unknown action {action!r}"}), 404
            body = playback(ws.ds)
            body["kind"] = ws.ds_kind.label
            return jsonify(body)

    # -----------------------------------------------------------------------
    # Binary search tree
    # -----------------------------------------------------------------------
    @app.post("/api/tree/<action>")
    def api_tree(action: str):
        data = payload()
        ws   = get_workspace()
        steps = []
        result: Dict[str, Any] = {}
        with ws.lock:
            if action == "insert":
                value = parse_value(data.get("value"))
                ws.tree_root = insert_node(
                    ws.tree_root, value, steps, width=current_app.config["TREE_CANVAS_WIDTH"]
                )
            elif action == "search":
                value = parse_value(data.get("value"))
                result["found"] = search_tree(ws.tree_root, value, steps)
            elif action == "traverse":
                result["visited"] = traverse_tree(ws.tree_root, data.get("order", "inorder"), steps)
            elif action == "reset":
                ws.tree_root = None
                steps.append(Step(explanation="Tree cleared"))
            else:
                return jsonify({"error": f"Unknown action {action!r}"}), 404
            ws.tree.load(steps)
            body = playback(ws.tree)
            body.update(result)
            body["tree"] = ws.tree_root.to_dict() if ws.tree_root else None
            return jsonify(body)

    # -----------------------------------------------------------------------
    # Graph
    # -----------------------------------------------------------------------
    @app.post("/api/graph/<action>")
    def api_graph(action: str):
        data = payload()
        ws   = get_workspace()
        steps = []
        result: Dict[str, Any] = {}
        with ws.lock:
            if action == "load":
                if "text" in data:
                    graph = GraphData.from_adjacency_list(
                        str(data["text"]), is_directed=bool(data.get("isDirected", False))
                    )
                elif isinstance(data.get("graph"), dict):
                    try:
                        graph = GraphData.from_dict(data["graph"])
                    except (AttributeError, KeyError, TypeError) as exc:
                        raise InputValidationError(f"Malformed graph: {exc}") from None
                else:
                    raise InputValidationError("Provide 'graph' or 'text'")
                if graph.node_count() == 0:
                    raise InputValidationError("Graph has no nodes")
                ws.graph_data = graph
                ws.graph.reset()
                return jsonify({"graph": graph.to_dict()})

            graph = ws.graph_data
            if graph is None:
                raise InputValidationError("Load a graph first")
            start = require_node(graph, data.get("start"))

            if action == "bfs":
                result["visited"] = bfs(graph, start, steps)
            elif action == "dfs":
                result["visited"] = dfs(graph, start, steps)
            elif action == "shortest-path":
                end = require_node(graph, data.get("end"))
                result["path"] = find_shortest_path(graph, start, end, steps)
            else:
                return jsonify({"error": f"Unknown action {action!r}"}), 404
            ws.graph.load(steps)
            body = playback(ws.graph)
            body.update(result)
            return jsonify(body)


app = create_app()


if __name__ == "__main__":
    logger.info("Starting DSA Trace Visualizer on http://0.0.0.0:5000")
    app.run(debug=True, host="0.0.0.0", port=5000)
