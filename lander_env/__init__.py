from gymnasium.envs.registration import register

# Registers "KeyboardLander-v0" so gym.make() can find
# lander_env.lander:KeyboardLander.
register(
    id='KeyboardLander-v0',
    entry_point='lander_env.lander:KeyboardLander',
    max_episode_steps=1000,  # ~16 seconds at 60 FPS
)
