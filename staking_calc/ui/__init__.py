"""Terminal UI for the Staking Reward Calculator."""
