from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from suggestions.engine import SuggestionEngine
from suggestions.search import get_suggestions
from suggestions import config as CFG

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: SuggestionEngine | None = None


# ---------- API ----------
@app.get("/api/suggest")
def api_suggest():
    q = request.args.get("q", "", type=str)
    k = request.args.get("k", None, type=int)
    if not q or _engine is None:
        return jsonify([])
    return jsonify(_engine.suggest(q, top_k=k))


@app.post("/api/suggest")
def api_suggest_stateless():
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        return jsonify({"error": "expected a JSON object"}), 400
    term = body.get("term")
    choices = body.get("choices")
    k = body.get("k", CFG.TOP_K)
    if not isinstance(term, str):
        return jsonify({"error": "'term' must be a string"}), 400
    if not isinstance(choices, list) or not all(isinstance(c, str) for c in choices):
        return jsonify({"error": "'choices' must be a list of strings"}), 400
    if isinstance(k, bool) or not isinstance(k, int):
        return jsonify({"error": "'k' must be an integer"}), 400
    return jsonify(get_suggestions(term, choices, k))


@app.get("/health")
def health():
    count = len(_engine.choices) if _engine is not None else 0
    return jsonify({"status": "ok", "choices": count})


# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Did you mean? • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:720px; margin:24px auto; padding:0 16px }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px }
h1{ font-size:20px; margin:0 0 8px 0 }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0 4px 0 }
.controls input{
  padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
#q{ flex:1 }
#k{ width:72px; text-align:center }
.controls input:focus{ border-color:var(--accent) }
#stats{ color:var(--muted); font-size:13px; margin-top:6px }
ol{ margin:16px 0 0 0; padding-left:28px }
li{ padding:6px 0; border-top:1px solid var(--border) }
li:first-child{ border-top:none }
.empty{ padding:24px; text-align:center; color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Did you mean?</h1>
      <div class="controls">
        <input id="q" type="text" placeholder="Type a term…" autocomplete="off" autofocus />
        <input id="k" type="number" min="0" value="5" />
      </div>
      <div id="stats">Ready.</div>
      <div id="out" class="empty">Start typing to see suggestions.</div>
    </div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), k = $("#k"), out = $("#out"), stats = $("#stats");
let t;
function esc(s){ return s.replace(/[&<>"]/g, (c)=>({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
async function search(){
  const term = q.value.trim();
  if(!term){ out.className="empty"; out.innerHTML="Start typing to see suggestions."; stats.textContent="Ready."; return; }
  try{
    const resp = await fetch(`/api/suggest?q=${encodeURIComponent(term)}&k=${parseInt(k.value||"5",10)}`);
    if(!resp.ok) throw new Error(`HTTP ${resp.status}`);
    const data = await resp.json();
    stats.textContent = `Suggestions: ${data.length}`;
    if(!data.length){ out.className="empty"; out.innerHTML="No suggestions."; return; }
    out.className = "";
    out.innerHTML = "<ol>" + data.map((s)=>`<li>${esc(s)}</li>`).join("") + "</ol>";
  }catch(e){
    stats.textContent = `Error: ${e.message ?? e}`;
  }
}
function debounced(){ clearTimeout(t); t = setTimeout(search, 150); }
q.addEventListener("input", debounced);
k.addEventListener("change", debounced);
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of SuggestionEngine")
    ap.add_argument("--roots", nargs="+", default=[], required=True)
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = SuggestionEngine()
    _engine.build(roots=args.roots, verbose=args.verbose)
    log.info("Serving %d choices on %s:%d", len(_engine.choices), args.host, args.port)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
