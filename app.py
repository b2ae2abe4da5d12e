import asyncio
import logging
import random
from datetime import datetime
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

import config
from price_scorer import ApartmentScorer
from services.validation import INVALID_VALUE_MESSAGE, ListingValidationError, validate_listing

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

ANALYSIS_ERROR_MESSAGE = "Mulkni tahlil qilishda xatolik yuz berdi"
VARIANTS = ("simple", "extended")

app = FastAPI(title="AI Ko'chmas Mulk Bahosi", version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

scorer = ApartmentScorer(rng=random.Random(config.scorer_seed()))
# delay draws come from their own stream, never from the scorer's
delay_rng = random.Random(config.scorer_seed())


# ==================== HEALTH CHECK ====================

@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "service": config.SERVICE_NAME,
    }


# ==================== ANALYSIS ====================

async def simulate_processing():
    """Pause like a model would; purely cosmetic."""
    low, high = config.ANALYSIS_DELAY_MIN, config.ANALYSIS_DELAY_MAX
    if high <= 0:
        return
    await asyncio.sleep(delay_rng.uniform(max(low, 0), high))


@app.post("/api/analyze")
async def analyze(request: Request, variant: Optional[str] = None):
    """Score a listing; 400 on invalid input, 500 on anything unexpected."""
    variant = (variant or config.ANALYSIS_VARIANT).lower()
    if variant not in VARIANTS:
        return JSONResponse({"error": INVALID_VALUE_MESSAGE.format(field="variant")}, status_code=400)

    try:
        payload = await request.json()
        data = validate_listing(payload)

        await simulate_processing()

        if variant == "simple":
            result = scorer.analyze(data)
        else:
            result = scorer.analyze_extended(data)

        return JSONResponse(result.to_wire())

    except ListingValidationError as e:
        return JSONResponse({"error": e.message}, status_code=400)
    except Exception as e:
        logger.error(f"Analysis error: {e}")
        return JSONResponse({"error": ANALYSIS_ERROR_MESSAGE}, status_code=500)


# ==================== FORM ====================

@app.get("/", response_class=HTMLResponse)
def analysis_form():
    """Single-page form posting to /api/analyze"""
    html = """
    <!DOCTYPE html>
    <html lang="uz">
    <head>
        <meta charset="utf-8">
        <title>AI Ko'chmas Mulk Bahosi</title>
        <style>
            * { margin: 0; padding: 0; box-sizing: border-box; }
            body { font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif; background: #f5f5f5; padding: 20px; }
            .container { max-width: 640px; margin: 0 auto; background: white; border-radius: 12px; box-shadow: 0 2px 10px rgba(0,0,0,0.1); padding: 32px; }
            h1 { margin-bottom: 6px; }
            .subtitle { color: #999; margin-bottom: 24px; font-size: 14px; }
            .row { display: grid; grid-template-columns: 1fr 1fr; gap: 12px; }
            .form-group { margin-bottom: 14px; }
            label { display: block; margin-bottom: 4px; font-weight: 500; color: #333; }
            input, select, textarea { width: 100%; padding: 10px; border: 1px solid #ddd; border-radius: 6px; font-size: 14px; }
            button { width: 100%; padding: 14px; background: #111; color: white; border: none; border-radius: 6px; font-size: 16px; font-weight: 600; cursor: pointer; margin-top: 10px; }
            #result { margin-top: 24px; }
            .score { font-size: 36px; font-weight: 700; }
            .error { color: #c0392b; }
            #saved li { margin-top: 6px; font-size: 14px; }
        </style>
    </head>
    <body>
        <div class="container">
            <h1>AI Ko'chmas Mulk Bahosi</h1>
            <div class="subtitle">O'zbekiston ko'chmas mulkini aqlli tahlil qiling</div>
            <form id="form" onsubmit="submitForm(event)">
                <div class="row">
                    <div class="form-group"><label>Mulk turi</label>
                        <select id="propertyType"><option value="rent">Ijara</option><option value="sale">Sotish</option></select></div>
                    <div class="form-group"><label>Narx ($)</label><input type="number" id="price" required></div>
                </div>
                <div class="row">
                    <div class="form-group"><label>Maydon (m²)</label><input type="number" id="size" required></div>
                    <div class="form-group"><label>Xonalar</label><input type="number" id="rooms" required></div>
                </div>
                <div class="row">
                    <div class="form-group"><label>Shahar/Viloyat</label><input type="text" id="city" placeholder="Toshkent Shahri" required></div>
                    <div class="form-group"><label>Tuman/Mahalla</label><input type="text" id="district" required></div>
                </div>
                <div class="form-group"><label>Aniq manzil</label><input type="text" id="exactLocation" required></div>
                <div class="row">
                    <div class="form-group"><label>Qavat</label><input type="number" id="floor" required></div>
                    <div class="form-group"><label>Umumiy qavatlar</label><input type="number" id="totalFloors" required></div>
                </div>
                <div class="row">
                    <div class="form-group"><label>Bino turi</label>
                        <select id="buildingType"><option value="apartment">Kvartira</option><option value="house">Uy</option><option value="studio">Studiya</option><option value="penthouse">Pentxaus</option></select></div>
                    <div class="form-group"><label>Holati</label>
                        <select id="condition"><option value="good">Yaxshi</option><option value="new">Yangi</option><option value="renovated">Ta'mirlangan</option><option value="needs_renovation">Ta'mirga muhtoj</option></select></div>
                </div>
                <div class="form-group"><label>Qurilgan yil</label><input type="number" id="yearBuilt" required></div>
                <div class="form-group"><label>Tavsif</label><textarea id="description" rows="4" required></textarea></div>
                <button type="submit">Tahlil qilish</button>
            </form>
            <div id="result"></div>
            <h3 style="margin-top: 24px;">Saqlanganlar</h3>
            <ul id="saved"></ul>
        </div>
        <script>
            const FIELDS = ['propertyType', 'price', 'size', 'city', 'district', 'exactLocation', 'rooms',
                            'floor', 'totalFloors', 'buildingType', 'condition', 'yearBuilt', 'description'];
            const NUMERIC = ['price', 'size', 'rooms', 'floor', 'totalFloors', 'yearBuilt'];
            let last = null;

            function loadSaved() {
                return JSON.parse(localStorage.getItem('savedProperties') || '[]');
            }

            // listing and result text is user input: only ever set as textContent
            function el(tag, text, className) {
                const node = document.createElement(tag);
                if (text !== undefined) node.textContent = text;
                if (className) node.className = className;
                return node;
            }

            function renderSaved() {
                const list = document.getElementById('saved');
                list.replaceChildren(...loadSaved().map(p =>
                    el('li', `${p.city}, ${p.district} - ${p.analysis.score}/10 (${p.analysis.label})`)));
            }

            function showError(message) {
                document.getElementById('result').replaceChildren(el('p', String(message), 'error'));
            }

            function saveLast() {
                if (!last) return;
                const now = Date.now();
                const saved = loadSaved().concat([{ ...last.data, id: String(now), analysis: last.result, timestamp: now }]).slice(-10);
                localStorage.setItem('savedProperties', JSON.stringify(saved));
                renderSaved();
            }

            function submitForm(e) {
                e.preventDefault();
                const data = {};
                FIELDS.forEach(f => {
                    const v = document.getElementById(f).value;
                    data[f] = NUMERIC.includes(f) ? parseFloat(v) : v;
                });
                document.getElementById('result').textContent = 'Tahlil qilinmoqda...';
                fetch('/api/analyze', {
                    method: 'POST',
                    headers: { 'Content-Type': 'application/json' },
                    body: JSON.stringify(data)
                }).then(r => r.json()).then(d => {
                    if (d.error) {
                        showError(d.error);
                        return;
                    }
                    last = { data: data, result: d };
                    const label = el('p');
                    label.appendChild(el('strong', d.label));
                    const save = el('button', 'Saqlash');
                    save.addEventListener('click', saveLast);
                    document.getElementById('result').replaceChildren(
                        el('div', `${d.score}/10`, 'score'), label, el('p', d.explanation), save);
                }).catch(showError);
            }

            renderSaved();
        </script>
    </body>
    </html>
    """
    return HTMLResponse(html)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
