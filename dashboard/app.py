import os
from typing import Any, Callable

import pandas as pd
import plotly.express as px
import requests
import streamlit as st

from pothub.services import PotHubClient

try:
    from streamlit_autorefresh import st_autorefresh
except Exception:  # pragma: no cover - optional dependency fallback
    st_autorefresh = None


DEFAULT_BACKEND_URL = os.getenv("BACKEND_API_URL", "http://localhost:8080/api")
REQUEST_TIMEOUT = 8
AUTO_REFRESH_DEFAULT = os.getenv("DASHBOARD_AUTO_REFRESH", "true").lower() == "true"


st.set_page_config(page_title="PotHub Dashboard", layout="wide")


def call(action: Callable[[], Any]) -> tuple[Any, str | None]:
    try:
        return action(), None
    except requests.RequestException as exc:
        return None, str(exc)


def report(error: str | None, success: str) -> None:
    if error:
        st.error(error)
        return
    # Rerun so every table reloads; the message survives in session state.
    st.session_state["flash"] = success
    st.rerun()


st.title("PotHub")
st.caption("Pots, their sensors and their devices")

flash = st.session_state.pop("flash", None)
if flash:
    st.success(flash)

with st.sidebar:
    st.header("Settings")
    backend_url = st.text_input("Backend API URL", value=DEFAULT_BACKEND_URL)
    auto_refresh = st.checkbox("Auto refresh", value=AUTO_REFRESH_DEFAULT)
    refresh_seconds = st.slider("Refresh interval (seconds)", min_value=5, max_value=60, value=15, step=5)

if auto_refresh and st_autorefresh:
    st_autorefresh(interval=refresh_seconds * 1000, key="pothub-refresh")

client = PotHubClient(backend_url, timeout=REQUEST_TIMEOUT)

_, health_error = call(client.health)
if health_error:
    st.error(f"Backend unavailable: {health_error}")
    st.stop()

pots, pots_error = call(client.list_pots)
sensors, sensors_error = call(client.list_sensors)
devices, devices_error = call(client.list_devices)

st.subheader("Pots")
if pots_error:
    st.warning(f"Pots unavailable: {pots_error}")
elif not pots:
    st.info("No pots yet. Create one below.")
else:
    for pot in pots:
        with st.expander(f"#{pot['id']} {pot['name']} ({len(pot['sensors'])} sensors, {len(pot['devices'])} devices)"):
            if pot["sensors"]:
                st.dataframe(pd.DataFrame(pot["sensors"]), use_container_width=True)
            if pot["devices"]:
                st.dataframe(pd.DataFrame(pot["devices"]), use_container_width=True)
            if st.button("Delete pot", key=f"delete-pot-{pot['id']}"):
                _, err = call(lambda: client.delete_pot(pot["id"]))
                report(err, f"Pot {pot['id']} deleted")

with st.form("add-pot"):
    pot_name = st.text_input("Pot name")
    if st.form_submit_button("Create pot") and pot_name:
        created, err = call(lambda: client.add_pot(pot_name))
        report(err, f"Pot created with id {created['id']}" if created else "")

st.subheader("Sensors")
if sensors_error:
    st.warning(f"Sensors unavailable: {sensors_error}")
elif sensors:
    df = pd.DataFrame(sensors)
    df["pot"] = df["pot_id"].map(lambda value: "unassigned" if pd.isna(value) else f"pot {int(value)}")
    st.dataframe(df, use_container_width=True)
    fig = px.bar(df, x="id", y="value", color="pot", hover_data=["type", "status"], title="Latest sensor values")
    st.plotly_chart(fig, use_container_width=True)
    doomed = st.selectbox("Sensor to remove", list(df["id"]))
    if st.button("Delete sensor"):
        _, err = call(lambda: client.delete_sensor(doomed))
        report(err, f"Sensor {doomed} deleted")
else:
    st.info("No sensors registered")

pot_choices = {"(none)": None}
pot_choices.update({f"#{pot['id']} {pot['name']}": pot["id"] for pot in pots or []})

with st.form("add-sensor"):
    s1, s2, s3, s4, s5 = st.columns(5)
    sensor_id = s1.text_input("Sensor id")
    sensor_type = s2.text_input("Type", value="temperature")
    sensor_value = s3.number_input("Value", value=0.0)
    sensor_status = s4.text_input("Status", value="ok")
    sensor_pot = s5.selectbox("Pot", list(pot_choices), key="sensor-pot")
    if st.form_submit_button("Add sensor") and sensor_id:
        payload = {
            "id": sensor_id,
            "type": sensor_type,
            "value": float(sensor_value),
            "status": sensor_status,
            "pot_id": pot_choices[sensor_pot],
        }
        _, err = call(lambda: client.add_sensor(payload))
        report(err, f"Sensor {sensor_id} added")

st.subheader("Devices")
if devices_error:
    st.warning(f"Devices unavailable: {devices_error}")
elif devices:
    st.dataframe(pd.DataFrame(devices), use_container_width=True)
    d1, d2, d3 = st.columns([2, 2, 1])
    target = d1.selectbox("Device", [device["id"] for device in devices])
    new_status = d2.text_input("New status", value="on", key="new-device-status")
    if d3.button("Update status", key="update-device-status", use_container_width=True):
        _, err = call(lambda: client.update_device_status(target, new_status))
        report(err, f"Device {target} set to {new_status}")
    if d3.button("Delete device", use_container_width=True):
        _, err = call(lambda: client.delete_device(target))
        report(err, f"Device {target} deleted")
else:
    st.info("No devices registered")

with st.form("add-device"):
    c1, c2, c3, c4 = st.columns(4)
    device_id = c1.text_input("Device id")
    device_type = c2.text_input("Type", value="pump")
    device_status = c3.text_input("Status", value="off")
    device_pot = c4.selectbox("Pot", list(pot_choices), key="device-pot")
    if st.form_submit_button("Add device") and device_id:
        payload = {
            "id": device_id,
            "type": device_type,
            "status": device_status,
            "pot_id": pot_choices[device_pot],
        }
        _, err = call(lambda: client.add_device(payload))
        report(err, f"Device {device_id} added")
