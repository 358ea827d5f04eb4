import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import streamlit as st
import pandas as pd

from dotenv import load_dotenv
load_dotenv()

from insura.config import get_config, get_rating_table
from insura.agent.tools import dispatch, format_inr
from insura.agent.registry import build_agent_config
from insura.pricing.pricing_contracts import FamilyPremiumInput
from insura.pricing.strategy_factory import get_pricer
from insura.utils.events import read_events


st.set_page_config(page_title="Health Premium Calculator", layout="centered")
st.title("Health Insurance Premium Calculator")

_cfg = get_config()


def _show_validation(field_type: str, value) -> bool:
    """Run the same validate_field tool the voice agent uses; show the message on failure."""
    res = dispatch("validate_field", {"fieldType": field_type, "value": value}, cfg=_cfg)
    if not res.get("isValid"):
        st.error(res.get("errorMessage", "Invalid value"))
        return False
    return True


def _parse_amount(text: str):
    res = dispatch("parse_amount", {"amountText": text}, cfg=_cfg)
    if not res.get("success"):
        st.error(res.get("error"))
        return None
    return res["amount"]


# ---------------- Sidebar ---------------- #

with st.sidebar:
    st.markdown("### Plan")
    plan = st.radio("Do you need Individual or Family health insurance?", ["Individual", "Family"])

    st.markdown("---")
    st.markdown("### Agent")
    agent = build_agent_config(_cfg)
    st.write(f"**Name:** {agent['name']}")
    st.write(f"**Voice:** {agent['voice']}")
    st.write(f"**Pricing strategy:** {_cfg['pricing_strategy']}")
    with st.expander("Tools"):
        st.json([t["name"] for t in agent["tools"]])

    recent = read_events("tool.invoked")[-5:]
    if recent:
        st.markdown("**Recent tool calls**")
        for ev in reversed(recent):
            p = ev.get("payload", {})
            st.caption(f"{ev.get('ts', '—')} · {p.get('tool')} · {'ok' if p.get('success') else 'failed'}")


# ---------------- Applicant ---------------- #

with st.form("quote"):
    st.subheader("Applicant")
    col1, col2 = st.columns(2)
    with col1:
        name = st.text_input("Name")
        mobile = st.text_input("Mobile number")
        email = st.text_input("Email")
    with col2:
        city = st.text_input("City")
        amount_text = st.text_input("Amount insured", placeholder="e.g. 12 lakhs, 1.2M, 1200000")

    if plan == "Individual":
        c1, c2 = st.columns(2)
        with c1:
            age = st.number_input("Age", min_value=1, max_value=119, value=30, step=1)
        with c2:
            gender = st.selectbox("Gender", ["Male", "Female"])
    else:
        c1, c2 = st.columns(2)
        with c1:
            husband_age = st.number_input("Husband age", min_value=1, max_value=119, value=35, step=1)
            n_sons = st.number_input("How many sons do you have?", min_value=0, max_value=10, value=0, step=1)
        with c2:
            wife_age = st.number_input("Wife age", min_value=1, max_value=119, value=32, step=1)
            n_daughters = st.number_input("How many daughters do you have?", min_value=0, max_value=10, value=0, step=1)
        sons_txt = st.text_input("Ages of sons (comma separated, in order)", value="")
        daughters_txt = st.text_input("Ages of daughters (comma separated, in order)", value="")

    submitted = st.form_submit_button("Calculate premium")


def _ages(text: str, expected: int, label: str):
    parts = [p.strip() for p in (text or "").split(",") if p.strip()]
    if len(parts) != expected:
        st.error(f"Please give {expected} age(s) for {label}.")
        return None
    ages = []
    for i, p in enumerate(parts, start=1):
        if not _show_validation("age", p):
            st.caption(f"{label} {i}")
            return None
        ages.append(int(float(p)))
    return ages


if submitted:
    ok = True
    if not name.strip():
        st.error("Please enter a name.")
        ok = False
    ok = _show_validation("mobile", mobile.strip()) and ok
    ok = _show_validation("email", email.strip()) and ok
    if not city.strip():
        st.error("Please enter a city.")
        ok = False
    amount = _parse_amount(amount_text) if amount_text.strip() else None
    if amount is not None and not _show_validation("amount", amount):
        amount = None
    if amount is None and not amount_text.strip():
        st.error("Please enter the amount insured.")

    if ok and amount is not None:
        base = {"name": name.strip(), "mobile": mobile.strip(), "email": email.strip(),
                "city": city.strip(), "amountInsured": float(amount)}

        if plan == "Individual":
            res = dispatch("calculate_individual_premium",
                           {**base, "age": int(age), "gender": gender}, cfg=_cfg)
            if res.get("success"):
                p = res["premium"]
                m1, m2, m3 = st.columns(3)
                m1.metric("Member premium", f"₹{format_inr(p['memberPremium'])}")
                m2.metric("GST", f"₹{format_inr(p['gst'])}")
                m3.metric("Total", f"₹{format_inr(p['total'])}")
        else:
            sons = _ages(sons_txt, int(n_sons), "son")
            daughters = _ages(daughters_txt, int(n_daughters), "daughter")
            res = None
            if sons is not None and daughters is not None:
                res = dispatch("calculate_family_premium", {
                    **base,
                    "husbandAge": int(husband_age),
                    "wifeAge": int(wife_age),
                    "sons": [{"age": a} for a in sons],
                    "daughters": [{"age": a} for a in daughters],
                }, cfg=_cfg)
            if res and res.get("success"):
                p = res["premium"]
                m1, m2, m3, m4 = st.columns(4)
                m1.metric("Members", p["memberCount"])
                m2.metric("After discount", f"₹{format_inr(p['discounted'])}")
                m3.metric("GST", f"₹{format_inr(p['gst'])}")
                m4.metric("Total", f"₹{format_inr(p['total'])}")

                # per-member breakdown from the pricing result, not recomputed per row
                pricer = get_pricer(_cfg["pricing_strategy"], get_rating_table(_cfg))
                fam = FamilyPremiumInput(int(husband_age), int(wife_age), sons, daughters, base["city"], base["amountInsured"])
                priced = pricer.price_family(fam)
                labels = ["Husband", "Wife"] + [f"Son {i}" for i in range(1, len(sons) + 1)] \
                    + [f"Daughter {i}" for i in range(1, len(daughters) + 1)]
                rows = []
                for label, m, premium in zip(labels, fam.members(), priced.member_premiums):
                    rows.append({
                        "member": label,
                        "age": m.age,
                        "gender": m.gender,
                        "age factor": pricer.age_factor(m.age),
                        "city factor": pricer.city_factor(fam.city),
                        "gender factor": pricer.gender_factor(m.gender),
                        "premium (₹)": premium,
                    })
                st.dataframe(pd.DataFrame(rows), hide_index=True, use_container_width=True)

        if res is not None and res.get("success"):
            st.success(f"The total premium is Rs. {res['premium']['totalInWords']}")
            with st.expander("Summary"):
                st.text(res["summary"])
        elif res is not None:
            st.error(res.get("error", "Calculation failed"))
            for d in res.get("details", []):
                st.caption(d)
