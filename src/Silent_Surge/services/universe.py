"""Tracked universe of NSE equities and symbol helpers.

Symbols carry the ``.NS`` suffix Yahoo Finance requires for NSE listings.
The list can be replaced at runtime through the ``UNIVERSE_SYMBOLS`` setting.
"""

from __future__ import annotations

from typing import Final

from Silent_Surge.models.market_data import ticker_from_symbol

NIFTY_50_SYMBOL: Final[str] = "^NSEI"

NIFTY_200_SYMBOLS: Final[list[str]] = [
    # Nifty 50
    "RELIANCE.NS",
    "TCS.NS",
    "HDFCBANK.NS",
    "INFY.NS",
    "ICICIBANK.NS",
    "HINDUNILVR.NS",
    "BHARTIARTL.NS",
    "SBIN.NS",
    "ITC.NS",
    "KOTAKBANK.NS",
    "LT.NS",
    "AXISBANK.NS",
    "BAJFINANCE.NS",
    "ASIANPAINT.NS",
    "MARUTI.NS",
    "HCLTECH.NS",
    "TITAN.NS",
    "SUNPHARMA.NS",
    "WIPRO.NS",
    "ULTRACEMCO.NS",
    "NTPC.NS",
    "POWERGRID.NS",
    "NESTLEIND.NS",
    "TATAMOTORS.NS",
    "TECHM.NS",
    "BAJAJFINSV.NS",
    "ADANIENT.NS",
    "ADANIPORTS.NS",
    "ONGC.NS",
    "TATASTEEL.NS",
    "JSWSTEEL.NS",
    "COALINDIA.NS",
    "HDFCLIFE.NS",
    "SBILIFE.NS",
    "GRASIM.NS",
    "M&M.NS",
    "DIVISLAB.NS",
    "BPCL.NS",
    "BAJAJ-AUTO.NS",
    "DRREDDY.NS",
    "CIPLA.NS",
    "EICHERMOT.NS",
    "APOLLOHOSP.NS",
    "HEROMOTOCO.NS",
    "UPL.NS",
    "TATACONSUM.NS",
    "BRITANNIA.NS",
    "INDUSINDBK.NS",
    "HINDALCO.NS",
    "VEDL.NS",
    # Nifty Next 50
    "ADANIGREEN.NS",
    "AMBUJACEM.NS",
    "AUROPHARMA.NS",
    "BANDHANBNK.NS",
    "BANKBARODA.NS",
    "BERGEPAINT.NS",
    "BIOCON.NS",
    "BOSCHLTD.NS",
    "CHOLAFIN.NS",
    "COLPAL.NS",
    "CONCOR.NS",
    "CUMMINSIND.NS",
    "DLF.NS",
    "DABUR.NS",
    "GAIL.NS",
    "GMRINFRA.NS",
    "GODREJCP.NS",
    "HAVELLS.NS",
    "HINDPETRO.NS",
    "IDFCFIRSTB.NS",
    "IGL.NS",
    "INDUSTOWER.NS",
    "IRCTC.NS",
    "JUBLFOOD.NS",
    "LICI.NS",
    "LUPIN.NS",
    "MARICO.NS",
    "MUTHOOTFIN.NS",
    "NAUKRI.NS",
    "OBEROIRLTY.NS",
    "OFSS.NS",
    "PEL.NS",
    "PETRONET.NS",
    "PIDILITIND.NS",
    "PNB.NS",
    "POLYCAB.NS",
    "SBICARD.NS",
    "SHREECEM.NS",
    "SIEMENS.NS",
    "SRF.NS",
    "TORNTPHARM.NS",
    "TRENT.NS",
    "VOLTAS.NS",
    "ZOMATO.NS",
    "PIIND.NS",
    "PAGEIND.NS",
    "MPHASIS.NS",
    "LTIM.NS",
    "DMART.NS",
    "HAL.NS",
    # Rest of the Nifty 200
    "ABB.NS",
    "ACC.NS",
    "ALKEM.NS",
    "ASHOKLEY.NS",
    "ATUL.NS",
    "BALKRISIND.NS",
    "BEL.NS",
    "BHARATFORG.NS",
    "BHEL.NS",
    "CANFINHOME.NS",
    "CHAMBLFERT.NS",
    "CROMPTON.NS",
    "CANBK.NS",
    "DEEPAKNTR.NS",
    "DELTACORP.NS",
    "DIXON.NS",
    "ESCORTS.NS",
    "EXIDEIND.NS",
    "FEDERALBNK.NS",
    "GLENMARK.NS",
    "GNFC.NS",
    "GSPL.NS",
    "HDFCAMC.NS",
    "HONAUT.NS",
    "ICICIPRULI.NS",
    "ICICIGI.NS",
    "IDEA.NS",
    "IDBI.NS",
    "INDHOTEL.NS",
    "IOC.NS",
    "IPCALAB.NS",
    "JINDALSTEL.NS",
    "JKCEMENT.NS",
    "KPITTECH.NS",
    "LAURUSLABS.NS",
    "LICHSGFIN.NS",
    "LTTS.NS",
    "MANAPPURAM.NS",
    "MCX.NS",
    "METROPOLIS.NS",
    "MFSL.NS",
    "MGL.NS",
    "MOTHERSON.NS",
    "NAM-INDIA.NS",
    "NATIONALUM.NS",
    "NAVINFLUOR.NS",
    "NMDC.NS",
    "PERSISTENT.NS",
    "PFC.NS",
    "PVRINOX.NS",
    "RAMCOCEM.NS",
    "RECLTD.NS",
    "SAIL.NS",
    "SONACOMS.NS",
    "STARHEALTH.NS",
    "SUNTV.NS",
    "SYNGENE.NS",
    "TATACHEM.NS",
    "TATACOMM.NS",
    "TATAPOWER.NS",
    "TORNTPOWER.NS",
    "TVSMOTOR.NS",
    "UBL.NS",
    "UNIONBANK.NS",
    "UNITDSPR.NS",
    "VBL.NS",
    "ZEEL.NS",
    "ZYDUSLIFE.NS",
    "COFORGE.NS",
    "MAXHEALTH.NS",
    "ASTRAL.NS",
    "BATAINDIA.NS",
    "CAMS.NS",
    "CLEAN.NS",
    "CYIENT.NS",
    "DELHIVERY.NS",
    "DEVYANI.NS",
    "EMAMILTD.NS",
    "FORTIS.NS",
    "HAPPSTMNDS.NS",
    "INDIAMART.NS",
    "IRFC.NS",
    "KALYANKJIL.NS",
    "KEI.NS",
    "LALPATHLAB.NS",
    "LODHA.NS",
    "MRF.NS",
    "NHPC.NS",
    "PHOENIXLTD.NS",
    "POONAWALLA.NS",
    "PRESTIGE.NS",
    "RAJESHEXPO.NS",
    "RELAXO.NS",
    "SJVN.NS",
    "SUNDARMFIN.NS",
    "SUPREMEIND.NS",
    "THERMAX.NS",
    "TIINDIA.NS",
    "TRIDENT.NS",
    "WHIRLPOOL.NS",
]

__all__ = ["NIFTY_50_SYMBOL", "NIFTY_200_SYMBOLS", "ticker_from_symbol"]
