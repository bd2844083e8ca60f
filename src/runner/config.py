# --- Display ---
WIDTH = 960
HEIGHT = 540
FPS = 60
FRAME_MS = 1000.0 / 60      # one nominal frame; physics dt is measured in these
MAX_FRAME_MS = 40.0         # clamp stalls (tab switch, window drag)

# --- World / Physics (per nominal frame) ---
BASE_HEIGHT = 100           # ground band height; ground line = viewport height - BASE_HEIGHT
GRAVITY = 1.05
JUMP_POWER = -18.0          # negative = upward
BASE_SCROLL_SPEED = 4.0     # px per frame at run start
SPEED_STEP = 0.9            # added to base speed at each milestone
SPEED_INCREASE_INTERVAL = 700
DISTANCE_SCALE = 0.08       # px scrolled -> meters; shared by generator lookahead
SAFE_ZONE_DISTANCE = 40     # meters of obstacle-free ground at start

# --- Collision tolerances ---
LAND_EPS = 2
LAND_MAX_UPWARD_VY = -6.0   # faster upward motion never counts as a landing
HIT_DEPTH = 10              # bottom must sink this far below a bump top to hit its face
SINK_DEPTH = 10             # anti-sink snap threshold on solid ground
FALL_NUDGE_VY = 0.8         # vy given when walking off an edge
FALL_DEATH_MARGIN = 60      # px below viewport bottom

# --- Player ---
PLAYER_W = 48
PLAYER_H = 48
PLAYER_EYE = (32, 10)       # eye offset from player's top-left
SQUISH_PER_VY = 0.02
SQUISH_RECOVERY = 0.1

# --- Level generation ---
GEN_START_X = -200
HORIZON_FACTOR = 2          # keep terrain generated up to 2x viewport width
SOLID_MIN_W = 100
SOLID_MAX_W = 200
HOLE_CHANCE = 0.08
HOLE_MIN_W = 40
HOLE_MAX_W = 80
BUMP_CHANCE = 0.35          # cumulative with HOLE_CHANCE
BUMP_MIN_W = 30
BUMP_MAX_W = 70
BUMP_MIN_H = 20
BUMP_MAX_H = 60
BUMP_COIN_CHANCE = 0.3
BUMP_COIN_OFFSET = 28       # coin centre above bump top
SOLID_COIN_CHANCE = 0.25
SOLID_COIN_HEIGHT = 36      # coin centre above ground line
SOLID_COIN_EDGE = 40
SAFE_SOLID_CHANCE = 0.7     # forced solid after a hole/bump
SAFE_SOLID_MIN_W = 60
SAFE_SOLID_MAX_W = 120
SEGMENT_TRIM_X = -300
COIN_TRIM_X = -300
COIN_TRIM_SLACK = 60

# --- Coins ---
COIN_R = 12
COIN_PICKUP_SLACK = 6

# --- Particles (per tick, not dt-scaled) ---
DUST_GRAVITY = 0.2
SPARKLE_GRAVITY = 0.15
JUMP_DUST_COUNT = 8
JUMP_DUST_LIFE = 20
LAND_DUST_COUNT = 12
LAND_DUST_LIFE = 25
MILESTONE_BURST_COUNT = 15
MILESTONE_BURST_LIFE = 40
SPARKLE_COUNT = 15
SPARKLE_LIFE = 30

# --- Persistence / audio ---
HIGH_SCORE_FILE = "highscore.json"
AUDIO_DIR = "audio"
SOUND_FILES = {
    "jump": "jump_up.mp3",
    "coin": "retro_coin.mp3",
    "game_over": "game_over.mp3",
}
SOUND_VOLUMES = {"jump": 0.7, "coin": 0.5, "game_over": 0.7}

# --- Colors (RGB) ---
COLOR_SKY_TOP = (217, 79, 0)
COLOR_SKY_BOTTOM = (223, 106, 0)
COLOR_GROUND = (17, 17, 17)
COLOR_COIN = (246, 196, 49)
COLOR_COIN_SHEEN = (255, 214, 120)
COLOR_PLAYER = (0, 0, 0)
COLOR_EYE = (255, 255, 255)
COLOR_DUST = (51, 51, 51)
COLOR_MILESTONE = (255, 102, 0)
COLOR_FG = (255, 255, 255)
COLOR_PANEL = (20, 20, 20)
